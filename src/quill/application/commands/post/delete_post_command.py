"""Delete a post owned by the principal."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from quill.domain.post import NotPostAuthorError, PostRepository

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory
    from quill.application.ports.identity import Principal

logger = logging.getLogger(__name__)


class DeletePostCommand:
    """Delete a post and its category associations.

    Deleting a post that does not exist is not an error.
    """

    def __init__(self, post_repository: PostRepository):
        self._post_repo = post_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeletePostCommand:
        return cls(post_repository=factory.post_repository())

    async def execute(self, principal: Principal, post_id: UUID) -> None:
        post = await self._post_repo.find_by_id(post_id)
        if post is None:
            logger.debug("Post %s already gone, nothing to delete", post_id)
            return

        if not post.is_authored_by(principal.id):
            logger.warning(
                "User %s tried to delete post %s owned by %s",
                principal.id,
                post_id,
                post.author_id,
            )
            raise NotPostAuthorError(post_id=post_id, user_id=principal.id)

        await self._post_repo.delete(post_id)
        logger.info("Deleted post %s", post_id)
