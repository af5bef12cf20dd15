"""Category queries."""

from quill.application.queries.category.list_categories_query import (
    ListCategoriesQuery,
)

__all__ = ["ListCategoriesQuery"]
