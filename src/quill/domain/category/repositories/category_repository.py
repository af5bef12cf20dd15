"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from quill.domain.category.entities import Category


class CategoryRepository(ABC):
    """
    Repository interface for Category entities.

    Categories are global; no user scoping is applied.
    """

    @abstractmethod
    async def save(self, category: Category) -> None:
        """Insert or update a category.

        Raises
        ------
        CategoryAlreadyExistsError
            If the name or slug collides with another category.
        """

    @abstractmethod
    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find category by ID."""

    @abstractmethod
    async def find_by_ids(self, category_ids: Iterable[UUID]) -> List[Category]:
        """Find all categories whose ID is in ``category_ids``."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find category by exact name."""

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Category]:
        """Find category by slug."""

    @abstractmethod
    async def find_all(self) -> List[Category]:
        """All categories, newest first."""

    @abstractmethod
    async def count_posts(self, category_id: UUID) -> int:
        """Number of posts associated with the category."""

    @abstractmethod
    async def delete(self, category_id: UUID) -> None:
        """Delete a category. Unknown IDs are ignored."""
