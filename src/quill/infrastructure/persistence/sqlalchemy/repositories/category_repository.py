"""SQLAlchemy implementation of CategoryRepository."""

from __future__ import annotations

import logging
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.category import (
    Category,
    CategoryAlreadyExistsError,
    CategoryRepository,
)
from quill.domain.shared.exceptions import InternalError
from quill.infrastructure.persistence.sqlalchemy.models import (
    CategoryModel,
    PostCategoryModel,
)
from quill.infrastructure.persistence.sqlalchemy.repositories._utils import (
    integrity_message,
    violates,
)

logger = logging.getLogger(__name__)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    """SQLAlchemy implementation of category repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, category: Category) -> None:
        model = await self._session.get(CategoryModel, category.id)

        if model:
            logger.debug("Updating existing category: %s", category.name)
            self._update_model(model, category)
        else:
            logger.debug("Creating new category: %s", category.name)
            self._session.add(self._map_to_model(category))

        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Keep session usable after a failed flush
            await self._session.rollback()

            msg = integrity_message(exc)
            if violates(msg, "uq_categories_name", "categories", "name"):
                raise CategoryAlreadyExistsError(name=category.name) from exc
            if violates(msg, "uq_categories_slug", "categories", "slug"):
                raise CategoryAlreadyExistsError(slug=category.slug) from exc

            error_msg = "Failed to save category due to database constraint"
            raise InternalError(error_msg, details={"error": msg}) from exc

    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        model = await self._session.get(CategoryModel, category_id)
        return self._map_to_domain(model) if model else None

    async def find_by_ids(self, category_ids: Iterable[UUID]) -> list[Category]:
        ids = list(category_ids)
        if not ids:
            return []
        stmt = select(CategoryModel).where(CategoryModel.id.in_(ids))
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_by_name(self, name: str) -> Optional[Category]:
        stmt = select(CategoryModel).where(CategoryModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_slug(self, slug: str) -> Optional[Category]:
        stmt = select(CategoryModel).where(CategoryModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_all(self) -> list[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def count_posts(self, category_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(PostCategoryModel)
            .where(PostCategoryModel.category_id == category_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def delete(self, category_id: UUID) -> None:
        stmt = delete(CategoryModel).where(CategoryModel.id == category_id)
        await self._session.execute(stmt)
        await self._session.flush()
        logger.info("Category deleted: %s", category_id)

    @staticmethod
    def _map_to_domain(model: CategoryModel) -> Category:
        return Category.reconstitute(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _map_to_model(category: Category) -> CategoryModel:
        return CategoryModel(
            id=category.id,
            name=category.name,
            slug=category.slug,
            description=category.description,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )

    @staticmethod
    def _update_model(model: CategoryModel, category: Category) -> None:
        model.name = category.name
        model.slug = category.slug
        model.description = category.description
        model.updated_at = category.updated_at
