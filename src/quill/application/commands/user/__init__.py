"""User commands."""

from quill.application.commands.user.upsert_user_command import UpsertUserCommand

__all__ = ["UpsertUserCommand"]
