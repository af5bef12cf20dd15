"""Post schemas for API request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from quill.application.dtos import FeedPageDTO, PostDetailDTO, PostDTO
from quill.domain.post import Post, PostChanges
from quill.domain.shared.unset import UNSET
from quill.presentation.api.schemas.users import AuthorResponse


class PostResponse(BaseModel):
    """Response schema for a post."""

    id: UUID = Field(..., description="Post ID")
    title: str = Field(..., description="Title")
    slug: str = Field(..., description="URL slug derived from the title")
    content: str = Field(..., description="Body text")
    excerpt: Optional[str] = Field(None, description="Short summary")
    image_url: Optional[str] = Field(None, description="Cover image URL")
    published: bool = Field(..., description="Whether the post is public")
    author_id: str = Field(..., description="Author's user ID")
    category_ids: list[UUID] = Field(
        default_factory=list,
        description="IDs of the categories the post is filed under",
    )
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last modification timestamp")

    @classmethod
    def from_dto(cls, dto: PostDTO) -> "PostResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            slug=dto.slug,
            content=dto.content,
            excerpt=dto.excerpt,
            image_url=dto.image_url,
            published=dto.published,
            author_id=dto.author_id,
            category_ids=list(dto.category_ids),
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )

    @classmethod
    def from_post(cls, post: Post, category_ids=()) -> "PostResponse":
        return cls.from_dto(PostDTO.from_post(post, category_ids))


class PostDetailResponse(PostResponse):
    """A post with its author's public profile."""

    author: Optional[AuthorResponse] = Field(None, description="Post author")

    @classmethod
    def from_detail(cls, detail: PostDetailDTO) -> "PostDetailResponse":
        base = PostResponse.from_dto(detail.post)
        return cls(
            **base.model_dump(),
            author=AuthorResponse.from_dto(detail.author) if detail.author else None,
        )


class PostListResponse(BaseModel):
    posts: list[PostResponse] = Field(..., description="Posts, newest first")
    total: int = Field(..., description="Number of posts returned")


class FeedResponse(BaseModel):
    """One page of the public feed."""

    items: list[PostResponse] = Field(..., description="Posts on this page")
    total: int = Field(..., description="Total number of matching posts")
    page: int = Field(..., description="Current page number")
    page_size: int = Field(..., description="Items per page")
    pages: int = Field(..., description="Total number of pages (at least 1)")

    @classmethod
    def from_dto(cls, dto: FeedPageDTO) -> "FeedResponse":
        return cls(
            items=[PostResponse.from_dto(item) for item in dto.items],
            total=dto.total,
            page=dto.page,
            page_size=dto.page_size,
            pages=dto.pages,
        )


class PostCreateRequest(BaseModel):
    """Request schema for creating a post."""

    title: str = Field(..., description="Title (1-200 characters)")
    content: str = Field(..., description="Body text (non-empty)")
    excerpt: Optional[str] = Field(None, description="Summary (max 500 characters)")
    image_url: Optional[str] = Field(None, description="Cover image URL")
    published: bool = Field(default=False, description="Publish immediately")
    category_ids: list[UUID] = Field(
        default_factory=list,
        description="Categories to file the post under",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "TypeScript Best Practices in 2025",
                "content": "Strict mode first...",
                "published": True,
                "category_ids": [],
            },
        },
    )


class PostUpdateRequest(BaseModel):
    """Request schema for updating a post.

    Omitted fields are left unchanged. ``excerpt`` and ``image_url`` can be
    cleared with ``null``. ``category_ids``, when present (even ``[]``),
    replaces the post's whole category set.
    """

    title: Optional[str] = Field(None, description="New title")
    content: Optional[str] = Field(None, description="New body text")
    excerpt: Optional[str] = Field(None, description="New summary")
    image_url: Optional[str] = Field(None, description="New cover image URL")
    published: Optional[bool] = Field(None, description="Publish or unpublish")
    category_ids: Optional[list[UUID]] = Field(
        None,
        description="Replacement category set",
    )

    def to_changes(self) -> PostChanges:
        fields = self.model_fields_set

        def _given(name: str) -> bool:
            return name in fields and getattr(self, name) is not None

        return PostChanges(
            title=self.title if _given("title") else UNSET,
            content=self.content if _given("content") else UNSET,
            excerpt=self.excerpt if "excerpt" in fields else UNSET,
            image_url=self.image_url if "image_url" in fields else UNSET,
            published=self.published if _given("published") else UNSET,
        )
