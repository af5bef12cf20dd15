"""Shared domain components.

This module exports exceptions, the slug generator and time helpers
used across domain boundaries.
"""

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
from quill.domain.shared.slug import slugify
from quill.domain.shared.time import advance_timestamp, ensure_tz_aware, utc_now
from quill.domain.shared.unset import UNSET, Maybe, is_set

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "UniqueConstraintViolation",
    "ConflictError",
    "UnauthorizedError",
    "ForbiddenError",
    "InternalError",
    # Utilities
    "slugify",
    "advance_timestamp",
    "ensure_tz_aware",
    "utc_now",
    "UNSET",
    "Maybe",
    "is_set",
]
