"""Command layer - write operations that mutate state.

Commands never commit. The presentation layer owns the unit of work and
commits or rolls back once the command returns or raises.

Commands are organized by domain:
- post: create, update and delete posts with their category sets
- category: create, update and delete categories
- user: explicit profile upsert
"""

from quill.application.commands.category import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from quill.application.commands.post import (
    CreatePostCommand,
    DeletePostCommand,
    UpdatePostCommand,
)
from quill.application.commands.user import UpsertUserCommand

__all__ = [
    "CreateCategoryCommand",
    "CreatePostCommand",
    "DeleteCategoryCommand",
    "DeletePostCommand",
    "UpdateCategoryCommand",
    "UpdatePostCommand",
    "UpsertUserCommand",
]
