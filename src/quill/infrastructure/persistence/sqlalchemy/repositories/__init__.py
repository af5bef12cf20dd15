"""SQLAlchemy repository implementations."""

from quill.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from quill.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from quill.infrastructure.persistence.sqlalchemy.repositories.post_repository import (
    PostRepositorySQLAlchemy,
)
from quill.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "CategoryRepositorySQLAlchemy",
    "PostRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
