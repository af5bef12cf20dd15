"""Category repository interfaces."""

from quill.domain.category.repositories.category_repository import (
    CategoryRepository,
)

__all__ = ["CategoryRepository"]
