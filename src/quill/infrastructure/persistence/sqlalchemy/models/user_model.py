"""SQLAlchemy model for User aggregate."""

from typing import Optional

from sqlalchemy import String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from quill.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """
    Local record of an identity-provider principal.

    The primary key is the provider's subject identifier, stored verbatim.
    Deleting a user cascades to their posts through ``posts.author_id``.

    Table: users
    """

    __tablename__ = "users"

    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    full_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    avatar_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
