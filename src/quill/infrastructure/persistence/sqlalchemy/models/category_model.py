"""SQLAlchemy model for categories."""

from typing import Optional
from uuid import UUID

from sqlalchemy import Index, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from quill.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class CategoryModel(Base, TimestampMixin):
    """Database model for categories."""

    __tablename__ = "categories"

    __table_args__ = (
        UniqueConstraint("name", name="uq_categories_name"),
        UniqueConstraint("slug", name="uq_categories_slug"),
        Index("ix_categories_created_at", "created_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, slug={self.slug})>"
