"""Association table between posts and categories."""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from quill.infrastructure.persistence.sqlalchemy.models.base import Base


class PostCategoryModel(Base):
    """One row per (post, category) pair; removed with either side."""

    __tablename__ = "post_categories"

    __table_args__ = (Index("ix_post_categories_category_id", "category_id"),)

    post_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    category_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    )

    def __repr__(self) -> str:
        return f"<PostCategoryModel(post={self.post_id}, category={self.category_id})>"
