"""User aggregates."""

from quill.domain.user.aggregates.user import User

__all__ = ["User"]
