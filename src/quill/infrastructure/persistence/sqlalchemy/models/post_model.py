"""SQLAlchemy model for posts."""

from typing import Optional
from uuid import UUID

from sqlalchemy import (
    Boolean,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from quill.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class PostModel(Base, TimestampMixin):
    """Database model for posts."""

    __tablename__ = "posts"

    __table_args__ = (
        UniqueConstraint("slug", name="uq_posts_slug"),
        # List queries filter on these and always sort by created_at
        Index("ix_posts_author_id", "author_id"),
        Index("ix_posts_published_created_at", "published", "created_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    author_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(250), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<PostModel(id={self.id}, slug={self.slug})>"
