"""SQLAlchemy implementation of PostRepository."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Optional
from uuid import UUID

from sqlalchemy import Select, delete, distinct, func, insert, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.post import (
    AuthorStats,
    FeedQuery,
    Post,
    PostFilter,
    PostRepository,
    SlugAlreadyExistsError,
)
from quill.domain.shared.exceptions import InternalError
from quill.infrastructure.persistence.sqlalchemy.models import (
    PostCategoryModel,
    PostModel,
)
from quill.infrastructure.persistence.sqlalchemy.repositories._utils import (
    integrity_message,
    violates,
)

logger = logging.getLogger(__name__)


class PostRepositorySQLAlchemy(PostRepository):
    """SQLAlchemy implementation of post repository.

    All list operations are ordered by ``created_at`` descending. The
    category predicate is an inner join through ``post_categories``.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, post: Post) -> None:
        model = await self._session.get(PostModel, post.id)

        if model:
            logger.debug("Updating existing post: %s", post.id)
            self._update_model(model, post)
        else:
            logger.debug("Creating new post: %s", post.slug)
            self._session.add(self._map_to_model(post))

        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Keep session usable after a failed flush
            await self._session.rollback()

            msg = integrity_message(exc)
            if violates(msg, "uq_posts_slug", "posts", "slug"):
                raise SlugAlreadyExistsError(post.slug) from exc

            error_msg = "Failed to save post due to database constraint"
            raise InternalError(error_msg, details={"error": msg}) from exc

    async def find_by_id(self, post_id: UUID) -> Optional[Post]:
        model = await self._session.get(PostModel, post_id)
        return self._map_to_domain(model) if model else None

    async def find_by_slug(self, slug: str) -> Optional[Post]:
        stmt = select(PostModel).where(PostModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def exists_with_slug(self, slug: str) -> bool:
        stmt = select(PostModel.id).where(PostModel.slug == slug).limit(1)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_with_filter(self, post_filter: PostFilter) -> list[Post]:
        stmt = self._filtered(
            published=post_filter.published,
            author_id=post_filter.author_id,
            category_id=post_filter.category_id,
        )
        stmt = stmt.order_by(PostModel.created_at.desc()).limit(post_filter.limit)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_feed_page(self, query: FeedQuery) -> tuple[list[Post], int]:
        stmt = self._filtered(published=True, category_id=query.category_id)
        if query.search:
            stmt = stmt.where(
                or_(
                    PostModel.title.icontains(query.search, autoescape=True),
                    PostModel.content.icontains(query.search, autoescape=True),
                ),
            )

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self._session.execute(count_stmt)).scalar_one()

        page_stmt = (
            stmt.order_by(PostModel.created_at.desc())
            .offset(query.offset)
            .limit(query.page_size)
        )
        result = await self._session.execute(page_stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()], total

    async def delete(self, post_id: UUID) -> None:
        await self._session.execute(
            delete(PostCategoryModel).where(PostCategoryModel.post_id == post_id),
        )
        await self._session.execute(delete(PostModel).where(PostModel.id == post_id))
        await self._session.flush()
        logger.info("Post deleted: %s", post_id)

    async def replace_categories(
        self,
        post_id: UUID,
        category_ids: Iterable[UUID],
    ) -> None:
        rows = [
            {"post_id": post_id, "category_id": category_id}
            for category_id in dict.fromkeys(category_ids)
        ]
        await self._session.execute(
            delete(PostCategoryModel).where(PostCategoryModel.post_id == post_id),
        )
        if rows:
            await self._session.execute(insert(PostCategoryModel), rows)
        await self._session.flush()
        logger.debug("Post %s now has %d categories", post_id, len(rows))

    async def find_category_ids(self, post_id: UUID) -> list[UUID]:
        stmt = select(PostCategoryModel.category_id).where(
            PostCategoryModel.post_id == post_id,
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def find_category_ids_for(
        self,
        post_ids: Iterable[UUID],
    ) -> dict[UUID, list[UUID]]:
        ids = list(post_ids)
        if not ids:
            return {}
        stmt = select(PostCategoryModel.post_id, PostCategoryModel.category_id).where(
            PostCategoryModel.post_id.in_(ids),
        )
        result = await self._session.execute(stmt)

        by_post: dict[UUID, list[UUID]] = defaultdict(list)
        for post_id, category_id in result.all():
            by_post[post_id].append(category_id)
        return dict(by_post)

    async def get_author_stats(self, author_id: str) -> AuthorStats:
        total_stmt = (
            select(func.count())
            .select_from(PostModel)
            .where(PostModel.author_id == author_id)
        )
        published_stmt = total_stmt.where(PostModel.published.is_(True))
        categories_stmt = (
            select(func.count(distinct(PostCategoryModel.category_id)))
            .select_from(PostCategoryModel)
            .join(PostModel, PostModel.id == PostCategoryModel.post_id)
            .where(PostModel.author_id == author_id)
        )

        total = (await self._session.execute(total_stmt)).scalar_one()
        published = (await self._session.execute(published_stmt)).scalar_one()
        categories = (await self._session.execute(categories_stmt)).scalar_one()
        return AuthorStats(
            total_posts=total,
            published_posts=published,
            categories=categories,
        )

    @staticmethod
    def _filtered(
        published: Optional[bool] = None,
        author_id: Optional[str] = None,
        category_id: Optional[UUID] = None,
    ) -> Select:
        stmt = select(PostModel)
        if category_id is not None:
            stmt = stmt.join(
                PostCategoryModel,
                PostCategoryModel.post_id == PostModel.id,
            ).where(PostCategoryModel.category_id == category_id)
        if published is not None:
            stmt = stmt.where(PostModel.published.is_(published))
        if author_id is not None:
            stmt = stmt.where(PostModel.author_id == author_id)
        return stmt

    @staticmethod
    def _map_to_domain(model: PostModel) -> Post:
        return Post.reconstitute(
            id=model.id,
            title=model.title,
            slug=model.slug,
            content=model.content,
            author_id=model.author_id,
            excerpt=model.excerpt,
            image_url=model.image_url,
            published=model.published,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _map_to_model(post: Post) -> PostModel:
        return PostModel(
            id=post.id,
            title=post.title,
            slug=post.slug,
            content=post.content,
            author_id=post.author_id,
            excerpt=post.excerpt,
            image_url=post.image_url,
            published=post.published,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    @staticmethod
    def _update_model(model: PostModel, post: Post) -> None:
        model.title = post.title
        model.slug = post.slug
        model.content = post.content
        model.excerpt = post.excerpt
        model.image_url = post.image_url
        model.published = post.published
        model.updated_at = post.updated_at
