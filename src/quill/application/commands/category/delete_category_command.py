"""Delete a category that no post uses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from quill.domain.category import CategoryInUseError, CategoryRepository

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteCategoryCommand:
    """Delete a category unless posts are still filed under it."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: UUID) -> None:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            logger.debug("Category %s already gone, nothing to delete", category_id)
            return

        post_count = await self._category_repo.count_posts(category_id)
        if post_count > 0:
            logger.warning(
                "Refusing to delete category %s: %d posts assigned",
                category_id,
                post_count,
            )
            raise CategoryInUseError(category_id, post_count)

        await self._category_repo.delete(category_id)
        logger.info("Deleted category %s (%s)", category_id, category.name)
