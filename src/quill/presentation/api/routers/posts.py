"""Posts router for listing, browsing and authoring posts."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from quill.application.commands import (
    CreatePostCommand,
    DeletePostCommand,
    UpdatePostCommand,
)
from quill.application.queries import (
    BrowseFeedQuery,
    GetPostBySlugQuery,
    ListPostsQuery,
)
from quill.domain.post import DEFAULT_LIMIT, FeedQuery, PostFilter
from quill.presentation.api.dependencies import (
    AppSettings,
    CurrentPrincipal,
    RepoFactory,
)
from quill.presentation.api.schemas.posts import (
    FeedResponse,
    PostCreateRequest,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
    PostUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Limits are validated by the domain (400), not by FastAPI (422)
PublishedFilter = Annotated[
    bool | None,
    Query(description="Only published (true) or only drafts (false)"),
]
AuthorFilter = Annotated[str | None, Query(description="Only posts by this author")]
CategoryFilter = Annotated[
    UUID | None,
    Query(description="Only posts filed under this category"),
]
LimitParam = Annotated[int, Query(description="Maximum number of posts (1-100)")]


@router.get(
    "",
    summary="List posts",
    responses={
        200: {"description": "Posts, newest first"},
        400: {"description": "Invalid limit"},
    },
)
async def list_posts(
    factory: RepoFactory,
    published: PublishedFilter = None,
    author_id: AuthorFilter = None,
    category_id: CategoryFilter = None,
    limit: LimitParam = DEFAULT_LIMIT,
) -> PostListResponse:
    """
    List posts filtered by publish state, author and category.

    All filters are optional and combine with AND.
    """
    post_filter = PostFilter(
        published=published,
        author_id=author_id,
        category_id=category_id,
        limit=limit,
    )
    query = ListPostsQuery.from_factory(factory)
    posts = await query.execute(post_filter)

    return PostListResponse(
        posts=[PostResponse.from_dto(dto) for dto in posts],
        total=len(posts),
    )


@router.get(
    "/feed",
    summary="Browse published posts",
    responses={
        200: {"description": "One page of published posts"},
        400: {"description": "Invalid page or page size"},
    },
)
async def browse_feed(
    factory: RepoFactory,
    settings: AppSettings,
    category_id: CategoryFilter = None,
    search: Annotated[
        str | None,
        Query(description="Case-insensitive match on title or content"),
    ] = None,
    page: Annotated[int, Query(description="Page number, starting at 1")] = 1,
    page_size: Annotated[
        int | None,
        Query(description="Items per page (defaults to the server setting)"),
    ] = None,
) -> FeedResponse:
    """Public, paginated view of published posts."""
    feed_query = FeedQuery(
        category_id=category_id,
        search=search,
        page=page,
        page_size=(
            page_size if page_size is not None else settings.feed_page_size
        ),
    )
    query = BrowseFeedQuery.from_factory(factory)
    return FeedResponse.from_dto(await query.execute(feed_query))


@router.get(
    "/by-slug/{slug}",
    summary="Get post by slug",
    responses={
        200: {"description": "The post, or null if no post has this slug"},
    },
)
async def get_post_by_slug(
    slug: str,
    factory: RepoFactory,
) -> PostDetailResponse | None:
    """Look up a post by its exact slug. A missing post yields ``null``."""
    query = GetPostBySlugQuery.from_factory(factory)
    detail = await query.execute(slug)
    return PostDetailResponse.from_detail(detail) if detail else None


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
    responses={
        201: {"description": "Post created"},
        400: {"description": "Invalid input"},
        401: {"description": "Authentication required"},
        404: {"description": "Unknown category"},
        409: {"description": "Slug already exists"},
    },
)
async def create_post(
    request: PostCreateRequest,
    principal: CurrentPrincipal,
    factory: RepoFactory,
) -> PostResponse:
    """
    Create a post authored by the caller.

    The caller's user record is created or refreshed first. The slug is
    derived from the title and must not be used by any other post.
    """
    command = CreatePostCommand.from_factory(factory)

    try:
        post = await command.execute(
            principal=principal,
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            image_url=request.image_url,
            published=request.published,
            category_ids=request.category_ids,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return PostResponse.from_post(post, list(dict.fromkeys(request.category_ids)))


@router.patch(
    "/{post_id}",
    summary="Update post",
    responses={
        200: {"description": "Post updated"},
        400: {"description": "Invalid input"},
        401: {"description": "Authentication required"},
        403: {"description": "Not the author"},
        404: {"description": "Post or category not found"},
        409: {"description": "Slug already exists"},
    },
)
async def update_post(
    post_id: UUID,
    request: PostUpdateRequest,
    principal: CurrentPrincipal,
    factory: RepoFactory,
) -> PostResponse:
    """
    Update a post owned by the caller.

    Only fields present in the body change. A new title re-derives the
    slug; ``category_ids`` replaces the whole category set.
    """
    command = UpdatePostCommand.from_factory(factory)

    try:
        post = await command.execute(
            principal=principal,
            post_id=post_id,
            changes=request.to_changes(),
            category_ids=request.category_ids,
        )
        category_ids = await factory.post_repository().find_category_ids(post.id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return PostResponse.from_post(post, category_ids)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete post",
    responses={
        204: {"description": "Post deleted (or did not exist)"},
        401: {"description": "Authentication required"},
        403: {"description": "Not the author"},
    },
)
async def delete_post(
    post_id: UUID,
    principal: CurrentPrincipal,
    factory: RepoFactory,
) -> None:
    """Delete a post owned by the caller, with its category links."""
    command = DeletePostCommand.from_factory(factory)

    try:
        await command.execute(principal=principal, post_id=post_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
