"""Look up a single post by slug."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from quill.application.dtos import AuthorDTO, PostDetailDTO, PostDTO
from quill.domain.post import PostRepository
from quill.domain.user import UserRepository

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory


class GetPostBySlugQuery:
    """Return the post with its category IDs and author, or ``None``."""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ):
        self._post_repo = post_repository
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetPostBySlugQuery:
        return cls(
            post_repository=factory.post_repository(),
            user_repository=factory.user_repository(),
        )

    async def execute(self, slug: str) -> Optional[PostDetailDTO]:
        post = await self._post_repo.find_by_slug(slug)
        if post is None:
            return None

        category_ids = await self._post_repo.find_category_ids(post.id)
        author = await self._user_repo.find_by_id(post.author_id)
        return PostDetailDTO(
            post=PostDTO.from_post(post, category_ids),
            author=AuthorDTO.from_user(author) if author else None,
        )
