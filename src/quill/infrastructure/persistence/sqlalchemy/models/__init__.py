"""SQLAlchemy models for persistence layer."""

from quill.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from quill.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from quill.infrastructure.persistence.sqlalchemy.models.post_category_model import (
    PostCategoryModel,
)
from quill.infrastructure.persistence.sqlalchemy.models.post_model import PostModel
from quill.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "CategoryModel",
    "PostCategoryModel",
    "PostModel",
    "TimestampMixin",
    "UserModel",
]
