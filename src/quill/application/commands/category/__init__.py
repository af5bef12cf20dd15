"""Category commands."""

from quill.application.commands.category.create_category_command import (
    CreateCategoryCommand,
)
from quill.application.commands.category.delete_category_command import (
    DeleteCategoryCommand,
)
from quill.application.commands.category.update_category_command import (
    UpdateCategoryCommand,
)

__all__ = ["CreateCategoryCommand", "DeleteCategoryCommand", "UpdateCategoryCommand"]
