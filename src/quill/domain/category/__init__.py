"""Category domain.

Categories are shared labels for posts. A category can be renamed freely,
but it cannot be deleted while any post is still filed under it.
"""

from quill.domain.category.entities import Category
from quill.domain.category.exceptions import (
    CategoryAlreadyExistsError,
    CategoryInUseError,
    CategoryNotFoundError,
)
from quill.domain.category.repositories import CategoryRepository
from quill.domain.category.value_objects import CategoryChanges

__all__ = [
    "Category",
    "CategoryAlreadyExistsError",
    "CategoryChanges",
    "CategoryInUseError",
    "CategoryNotFoundError",
    "CategoryRepository",
]
