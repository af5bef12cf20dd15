"""Public profile lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from quill.application.dtos import AuthorDTO
from quill.domain.user import UserRepository

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory


class GetUserByIdQuery:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserByIdQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: str) -> Optional[AuthorDTO]:
        user = await self._user_repo.find_by_id(user_id)
        return AuthorDTO.from_user(user) if user else None
