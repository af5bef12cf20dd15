"""Create a post on behalf of the authenticated principal."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional
from uuid import UUID

from quill.application.services import IdentityResolver
from quill.domain.category import CategoryNotFoundError, CategoryRepository
from quill.domain.post import Post, PostRepository, SlugAlreadyExistsError
from quill.domain.shared.exceptions import (
    InternalError,
    UniqueConstraintViolation,
    ValidationError,
)

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory
    from quill.application.ports.identity import Principal

logger = logging.getLogger(__name__)


class CreatePostCommand:
    """Validate and create a post with its category associations.

    Steps, all inside the caller's unit of work:
    1. Validate the post fields and the category IDs (no writes yet)
    2. Provision the author's local user row
    3. Insert the post, then one association per distinct category
    """

    def __init__(
        self,
        post_repository: PostRepository,
        category_repository: CategoryRepository,
        identity_resolver: IdentityResolver,
    ):
        self._post_repo = post_repository
        self._category_repo = category_repository
        self._identity_resolver = identity_resolver

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreatePostCommand:
        return cls(
            post_repository=factory.post_repository(),
            category_repository=factory.category_repository(),
            identity_resolver=IdentityResolver.from_factory(factory),
        )

    async def execute(  # noqa: PLR0913
        self,
        principal: Principal,
        title: str,
        content: str,
        excerpt: Optional[str] = None,
        image_url: Optional[str] = None,
        published: bool = False,
        category_ids: Iterable[UUID] = (),
    ) -> Post:
        if not principal.id or not principal.email:
            msg = "Principal must have an id and an email"
            raise ValidationError(msg)

        post = Post.create(
            title=title,
            content=content,
            author_id=principal.id,
            excerpt=excerpt,
            image_url=image_url,
            published=published,
        )
        unique_category_ids = await self._resolve_categories(category_ids)

        await self._ensure_author(principal)

        if await self._post_repo.exists_with_slug(post.slug):
            raise SlugAlreadyExistsError(post.slug)

        await self._post_repo.save(post)
        if unique_category_ids:
            await self._post_repo.replace_categories(post.id, unique_category_ids)

        logger.info(
            "Created post %s (slug=%s, author=%s, categories=%d)",
            post.id,
            post.slug,
            post.author_id,
            len(unique_category_ids),
        )
        return post

    async def _resolve_categories(self, category_ids: Iterable[UUID]) -> List[UUID]:
        # Keep first-seen order, drop duplicates
        unique_ids = list(dict.fromkeys(category_ids))
        if not unique_ids:
            return []

        found = await self._category_repo.find_by_ids(unique_ids)
        found_ids = {category.id for category in found}
        for category_id in unique_ids:
            if category_id not in found_ids:
                raise CategoryNotFoundError(category_id)
        return unique_ids

    async def _ensure_author(self, principal: Principal) -> None:
        try:
            await self._identity_resolver.ensure_user(principal)
        except (ValidationError, UniqueConstraintViolation):
            # Domain errors keep their own code
            raise
        except Exception as e:
            msg = "Failed to provision the post author"
            raise InternalError(
                msg,
                details={"user_id": principal.id, "error": str(e)},
            ) from e
