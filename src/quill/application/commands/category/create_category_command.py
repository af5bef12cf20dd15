"""Create a category."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from quill.domain.category import (
    Category,
    CategoryAlreadyExistsError,
    CategoryRepository,
)

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateCategoryCommand:
    """Validate and create a new category with a unique name and slug."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(
        self,
        name: str,
        description: Optional[str] = None,
    ) -> Category:
        category = Category.create(name=name, description=description)

        if await self._category_repo.find_by_name(category.name):
            raise CategoryAlreadyExistsError(name=category.name)
        if await self._category_repo.find_by_slug(category.slug):
            raise CategoryAlreadyExistsError(slug=category.slug)

        await self._category_repo.save(category)
        logger.info("Created category %s (slug=%s)", category.id, category.slug)
        return category
