"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions inherit from DomainException
so the presentation layer can translate them in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_TITLE = "INVALID_TITLE"
    INVALID_CONTENT = "INVALID_CONTENT"
    INVALID_EXCERPT = "INVALID_EXCERPT"
    INVALID_CATEGORY_NAME = "INVALID_CATEGORY_NAME"
    INVALID_DESCRIPTION = "INVALID_DESCRIPTION"
    INVALID_LIMIT = "INVALID_LIMIT"
    INVALID_PAGE = "INVALID_PAGE"

    # Authentication / Authorization (401 / 403)
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_POST_AUTHOR = "NOT_POST_AUTHOR"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Unique constraint violations (409)
    UNIQUE_CONSTRAINT_VIOLATION = "UNIQUE_CONSTRAINT_VIOLATION"
    DUPLICATE_SLUG = "DUPLICATE_SLUG"
    DUPLICATE_CATEGORY = "DUPLICATE_CATEGORY"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"

    # Business rule conflicts (409)
    CONFLICT = "CONFLICT"
    CATEGORY_IN_USE = "CATEGORY_IN_USE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    This exception provides structured error information that can be
    used by the presentation layer to generate consistent API responses.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class UniqueConstraintViolation(DomainException):
    """Raised when a unique value (slug, name, email) is already taken."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNIQUE_CONSTRAINT_VIOLATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when a business rule blocks an operation on existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class UnauthorizedError(DomainException):
    """Raised when an operation needs a principal and none is present."""

    def __init__(
        self,
        message: str = "Authentication required",
        code: ErrorCode = ErrorCode.UNAUTHORIZED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ForbiddenError(DomainException):
    """Raised when the principal may not act on the target resource."""

    def __init__(
        self,
        message: str = "You are not allowed to modify this resource",
        code: ErrorCode = ErrorCode.FORBIDDEN,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class InternalError(DomainException):
    """Raised for datastore or provider faults that fit no other kind."""

    def __init__(
        self,
        message: str = "An internal error occurred",
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
