"""List posts matching a filter."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from quill.application.dtos import PostDTO
from quill.domain.post import PostFilter, PostRepository

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory


class ListPostsQuery:
    """Posts by publish state, author and category, newest first."""

    def __init__(self, post_repository: PostRepository):
        self._post_repo = post_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListPostsQuery:
        return cls(post_repository=factory.post_repository())

    async def execute(self, post_filter: PostFilter | None = None) -> List[PostDTO]:
        posts = await self._post_repo.find_with_filter(post_filter or PostFilter())
        if not posts:
            return []
        category_map = await self._post_repo.find_category_ids_for(
            [p.id for p in posts],
        )
        return [PostDTO.from_post(p, category_map.get(p.id, ())) for p in posts]
