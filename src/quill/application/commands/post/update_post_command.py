"""Update a post owned by the principal."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence
from uuid import UUID

from quill.domain.category import CategoryNotFoundError, CategoryRepository
from quill.domain.post import (
    NotPostAuthorError,
    Post,
    PostChanges,
    PostNotFoundError,
    PostRepository,
    SlugAlreadyExistsError,
)

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory
    from quill.application.ports.identity import Principal

logger = logging.getLogger(__name__)


class UpdatePostCommand:
    """Apply a partial update and optionally replace the category set."""

    def __init__(
        self,
        post_repository: PostRepository,
        category_repository: CategoryRepository,
    ):
        self._post_repo = post_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdatePostCommand:
        return cls(
            post_repository=factory.post_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(
        self,
        principal: Principal,
        post_id: UUID,
        changes: PostChanges,
        category_ids: Optional[Sequence[UUID]] = None,
    ) -> Post:
        """Update the post.

        Parameters
        ----------
        principal
            Caller; must be the post's author.
        post_id
            Post to update.
        changes
            Fields to change; unset fields are left as they are.
        category_ids
            ``None`` leaves the associations untouched. Any sequence,
            including an empty one, replaces the whole set.
        """
        post = await self._post_repo.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id=post_id)

        if not post.is_authored_by(principal.id):
            logger.warning(
                "User %s tried to modify post %s owned by %s",
                principal.id,
                post_id,
                post.author_id,
            )
            raise NotPostAuthorError(post_id=post_id, user_id=principal.id)

        unique_category_ids = await self._resolve_categories(category_ids)

        old_slug = post.slug
        post.apply(changes)
        if post.slug != old_slug:
            other = await self._post_repo.find_by_slug(post.slug)
            if other is not None and other.id != post.id:
                raise SlugAlreadyExistsError(post.slug)

        await self._post_repo.save(post)
        if unique_category_ids is not None:
            await self._post_repo.replace_categories(post.id, unique_category_ids)

        logger.info("Updated post %s (published=%s)", post.id, post.published)
        return post

    async def _resolve_categories(
        self,
        category_ids: Optional[Sequence[UUID]],
    ) -> Optional[List[UUID]]:
        if category_ids is None:
            return None
        unique_ids = list(dict.fromkeys(category_ids))
        if unique_ids:
            found = {c.id for c in await self._category_repo.find_by_ids(unique_ids)}
            missing = [cid for cid in unique_ids if cid not in found]
            if missing:
                raise CategoryNotFoundError(missing[0])
        return unique_ids
