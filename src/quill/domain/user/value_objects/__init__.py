"""User value objects."""

from quill.domain.user.value_objects.email import Email

__all__ = ["Email"]
