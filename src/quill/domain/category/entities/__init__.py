"""Category entities."""

from quill.domain.category.entities.category import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    MAX_SLUG_LENGTH,
    Category,
)

__all__ = [
    "Category",
    "MAX_DESCRIPTION_LENGTH",
    "MAX_NAME_LENGTH",
    "MAX_SLUG_LENGTH",
]
