"""Categories router."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from quill.application.commands import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from quill.application.queries import ListCategoriesQuery
from quill.presentation.api.dependencies import CurrentPrincipal, RepoFactory
from quill.presentation.api.schemas.categories import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List categories",
    responses={200: {"description": "All categories, newest first"}},
)
async def list_categories(factory: RepoFactory) -> list[CategoryResponse]:
    query = ListCategoriesQuery.from_factory(factory)
    categories = await query.execute()
    return [CategoryResponse.from_category(c) for c in categories]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    responses={
        201: {"description": "Category created"},
        400: {"description": "Invalid input"},
        401: {"description": "Authentication required"},
        409: {"description": "Name or slug already exists"},
    },
)
async def create_category(
    request: CategoryCreateRequest,
    principal: CurrentPrincipal,
    factory: RepoFactory,
) -> CategoryResponse:
    """Create a category. The slug is derived from the name."""
    command = CreateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            name=request.name,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    logger.info("Category %s created by %s", category.slug, principal.id)
    return CategoryResponse.from_category(category)


@router.patch(
    "/{category_id}",
    summary="Update category",
    responses={
        200: {"description": "Category updated"},
        400: {"description": "Invalid input"},
        401: {"description": "Authentication required"},
        404: {"description": "Category not found"},
        409: {"description": "Name or slug already exists"},
    },
)
async def update_category(
    category_id: UUID,
    request: CategoryUpdateRequest,
    principal: CurrentPrincipal,  # noqa: ARG001
    factory: RepoFactory,
) -> CategoryResponse:
    """Rename or re-describe a category. ``description: null`` clears it."""
    command = UpdateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            category_id=category_id,
            changes=request.to_changes(),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_category(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete category",
    responses={
        204: {"description": "Category deleted (or did not exist)"},
        401: {"description": "Authentication required"},
        409: {"description": "Posts are still assigned to the category"},
    },
)
async def delete_category(
    category_id: UUID,
    principal: CurrentPrincipal,  # noqa: ARG001
    factory: RepoFactory,
) -> None:
    """Delete a category that no post is filed under."""
    command = DeleteCategoryCommand.from_factory(factory)

    try:
        await command.execute(category_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
