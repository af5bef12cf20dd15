"""Category domain exceptions."""

from typing import Optional
from uuid import UUID

from quill.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    UniqueConstraintViolation,
)


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category cannot be found."""

    def __init__(self, category_id: UUID | str) -> None:
        super().__init__(
            message=f"Category '{category_id}' not found",
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={"category_id": str(category_id)},
        )


class CategoryAlreadyExistsError(UniqueConstraintViolation):
    """Raised when a category name or its slug is already taken."""

    def __init__(self, name: Optional[str] = None, slug: Optional[str] = None) -> None:
        if name:
            msg = f"Category with name '{name}' already exists"
        elif slug:
            msg = f"Category with slug '{slug}' already exists"
        else:
            msg = "Category already exists"
        super().__init__(
            message=msg,
            code=ErrorCode.DUPLICATE_CATEGORY,
            details={"name": name, "slug": slug},
        )


class CategoryInUseError(ConflictError):
    """Raised when deleting a category that still has posts assigned."""

    def __init__(self, category_id: UUID, post_count: int) -> None:
        super().__init__(
            message="Cannot delete category with assigned posts",
            code=ErrorCode.CATEGORY_IN_USE,
            details={"category_id": str(category_id), "post_count": post_count},
        )
