"""Public feed of published posts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quill.application.dtos import FeedPageDTO, PostDTO
from quill.domain.post import FeedQuery, PostRepository

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory


class BrowseFeedQuery:
    """Paginated published posts, optionally by category and search term.

    The search is a case-insensitive substring match on title or content.
    Pages past the end come back empty; ``pages`` is never below 1.
    """

    def __init__(self, post_repository: PostRepository):
        self._post_repo = post_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> BrowseFeedQuery:
        return cls(post_repository=factory.post_repository())

    async def execute(self, query: FeedQuery) -> FeedPageDTO:
        posts, total = await self._post_repo.find_feed_page(query)
        category_map = (
            await self._post_repo.find_category_ids_for([p.id for p in posts])
            if posts
            else {}
        )
        return FeedPageDTO(
            items=[PostDTO.from_post(p, category_map.get(p.id, ())) for p in posts],
            total=total,
            page=query.page,
            page_size=query.page_size,
        )
