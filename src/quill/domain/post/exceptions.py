"""Post domain exceptions."""

from typing import Optional
from uuid import UUID

from quill.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    UniqueConstraintViolation,
    ValidationError,
)


class PostNotFoundError(EntityNotFoundError):
    """Raised when a post cannot be found."""

    def __init__(self, post_id: Optional[UUID] = None, slug: Optional[str] = None):
        ref = str(post_id) if post_id is not None else slug
        super().__init__(
            message=f"Post '{ref}' not found",
            code=ErrorCode.POST_NOT_FOUND,
            details={
                "post_id": str(post_id) if post_id is not None else None,
                "slug": slug,
            },
        )


class SlugAlreadyExistsError(UniqueConstraintViolation):
    """Raised when a post slug is already used by another post."""

    def __init__(self, slug: str):
        super().__init__(
            message=f"A post with slug '{slug}' already exists",
            code=ErrorCode.DUPLICATE_SLUG,
            details={"slug": slug},
        )


class NotPostAuthorError(ForbiddenError):
    """Raised when someone other than the author tries to change a post."""

    def __init__(self, post_id: UUID, user_id: str):
        super().__init__(
            message="Only the author can modify this post",
            code=ErrorCode.NOT_POST_AUTHOR,
            details={"post_id": str(post_id), "user_id": user_id},
        )


class InvalidLimitError(ValidationError):
    def __init__(self, limit: int, minimum: int, maximum: int):
        super().__init__(
            message=f"Limit must be between {minimum} and {maximum}, got {limit}",
            code=ErrorCode.INVALID_LIMIT,
            details={"limit": limit},
        )


class InvalidPageError(ValidationError):
    def __init__(self, field: str, value: int):
        super().__init__(
            message=f"{field} must be a positive integer, got {value}",
            code=ErrorCode.INVALID_PAGE,
            details={field: value},
        )
