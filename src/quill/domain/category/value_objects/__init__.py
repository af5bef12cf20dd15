"""Category value objects."""

from quill.domain.category.value_objects.category_changes import CategoryChanges

__all__ = ["CategoryChanges"]
