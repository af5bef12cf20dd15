"""Post repository interface.

Defines the contract for Post persistence, including the post/category
association table. Implementations never commit; the caller owns the
unit of work.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple
from uuid import UUID

from quill.domain.post.aggregates import Post
from quill.domain.post.value_objects import AuthorStats, FeedQuery, PostFilter


class PostRepository(ABC):
    """Repository interface for Post aggregates."""

    @abstractmethod
    async def save(self, post: Post) -> None:
        """Insert or update a post and flush it.

        Raises
        ------
        SlugAlreadyExistsError
            If another post already uses the slug.
        """

    @abstractmethod
    async def find_by_id(self, post_id: UUID) -> Optional[Post]:
        """Find post by ID."""

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Post]:
        """Find post by exact slug."""

    @abstractmethod
    async def exists_with_slug(self, slug: str) -> bool:
        """Check whether any post uses the slug."""

    @abstractmethod
    async def find_with_filter(self, post_filter: PostFilter) -> List[Post]:
        """Posts matching all given predicates, newest first, capped."""

    @abstractmethod
    async def find_feed_page(self, query: FeedQuery) -> Tuple[List[Post], int]:
        """One page of the public feed and the total number of matches."""

    @abstractmethod
    async def delete(self, post_id: UUID) -> None:
        """Delete a post and its category associations."""

    @abstractmethod
    async def replace_categories(
        self,
        post_id: UUID,
        category_ids: Iterable[UUID],
    ) -> None:
        """Replace the post's whole category set (delete all, then insert)."""

    @abstractmethod
    async def find_category_ids(self, post_id: UUID) -> List[UUID]:
        """Category IDs associated with the post."""

    @abstractmethod
    async def find_category_ids_for(
        self,
        post_ids: Iterable[UUID],
    ) -> Dict[UUID, List[UUID]]:
        """Category IDs for several posts at once."""

    @abstractmethod
    async def get_author_stats(self, author_id: str) -> AuthorStats:
        """Dashboard counts for one author."""
