"""User domain - local records of identity-provider principals.

Design notes:
- User ID is issued by the external identity provider (opaque string)
- Records are created lazily the first time a principal mutates data
- Email, display name and avatar mirror the provider's latest values
- Repository interface defined here, implementation in infrastructure
"""

from quill.domain.user.aggregates import User
from quill.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from quill.domain.user.repositories import UserRepository
from quill.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
