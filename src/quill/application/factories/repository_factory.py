"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from quill.domain.category import CategoryRepository
from quill.domain.post import PostRepository
from quill.domain.user import UserRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories that share one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def post_repository(self) -> PostRepository:
        """Get post repository."""
        ...

    def category_repository(self) -> CategoryRepository:
        """Get category repository."""
        ...
