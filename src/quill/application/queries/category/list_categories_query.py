"""List all categories."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from quill.domain.category import Category, CategoryRepository

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory


class ListCategoriesQuery:
    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self) -> List[Category]:
        return await self._category_repo.find_all()
