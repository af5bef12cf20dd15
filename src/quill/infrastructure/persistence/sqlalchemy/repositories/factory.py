"""SQLAlchemy repository factory bound to one session."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from quill.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from quill.infrastructure.persistence.sqlalchemy.repositories.post_repository import (
    PostRepositorySQLAlchemy,
)
from quill.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    Every repository handed out shares the factory's session, so one request
    is one unit of work.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._post_repo: PostRepositorySQLAlchemy | None = None
        self._category_repo: CategoryRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def post_repository(self) -> PostRepositorySQLAlchemy:
        if self._post_repo is None:
            self._post_repo = PostRepositorySQLAlchemy(self._session)
        return self._post_repo

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(self._session)
        return self._category_repo
