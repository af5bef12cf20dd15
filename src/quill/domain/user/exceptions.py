"""User domain exceptions."""

from quill.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    UniqueConstraintViolation,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email address is empty or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class EmailAlreadyExistsError(UniqueConstraintViolation):
    """Email already registered to another user."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )
