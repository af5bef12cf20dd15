"""Update a category."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from quill.domain.category import (
    Category,
    CategoryAlreadyExistsError,
    CategoryChanges,
    CategoryNotFoundError,
    CategoryRepository,
)

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateCategoryCommand:
    """Rename and/or re-describe a category.

    The slug only follows the name when the name actually changes, and the
    new name and slug are checked against every other category.
    """

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: UUID, changes: CategoryChanges) -> Category:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        old_name, old_slug = category.name, category.slug
        category.apply(changes)

        if category.name != old_name:
            other = await self._category_repo.find_by_name(category.name)
            if other is not None and other.id != category.id:
                raise CategoryAlreadyExistsError(name=category.name)
        if category.slug != old_slug:
            other = await self._category_repo.find_by_slug(category.slug)
            if other is not None and other.id != category.id:
                raise CategoryAlreadyExistsError(slug=category.slug)

        await self._category_repo.save(category)
        logger.info("Updated category %s", category.id)
        return category
