"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with a consistent error
format. Nothing beyond the message and code reaches the client; details
(including datastore errors) are only logged.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from quill.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    InternalError,
    UnauthorizedError,
    UniqueConstraintViolation,
    ValidationError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TITLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CONTENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EXCERPT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CATEGORY_NAME: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DESCRIPTION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_LIMIT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAGE: status.HTTP_400_BAD_REQUEST,
    # 401 / 403
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_POST_AUTHOR: status.HTTP_403_FORBIDDEN,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.POST_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CATEGORY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - already exists
    ErrorCode.UNIQUE_CONSTRAINT_VIOLATION: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_SLUG: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_CATEGORY: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    # 409 Conflict - business rules
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.CATEGORY_IN_USE: status.HTTP_409_CONFLICT,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:  # NOQA: PLR0911
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (ConflictError, UniqueConstraintViolation)):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ForbiddenError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, UnauthorizedError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, InternalError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response."""
        status_code = _get_status_for_exception(exc)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Internal error on %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
                exc_info=exc.__cause__,
            )
            # Datastore messages stay in the logs
            return _create_error_response(
                status_code=status_code,
                message="An internal error occurred",
                code=exc.code.value,
            )

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
            headers=headers,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        This is the catch-all handler for any exceptions not handled by
        the domain handler above. Clients never see stack traces or SQL.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
