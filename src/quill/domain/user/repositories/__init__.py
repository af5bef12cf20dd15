"""User repository interfaces."""

from quill.domain.user.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
