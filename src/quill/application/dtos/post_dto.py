"""DTOs for post reads."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from quill.domain.post import Post
from quill.domain.user import User


@dataclass(frozen=True)
class PostDTO:
    """A post together with the IDs of its categories."""

    id: UUID
    title: str
    slug: str
    content: str
    excerpt: Optional[str]
    image_url: Optional[str]
    published: bool
    author_id: str
    created_at: datetime
    updated_at: datetime
    category_ids: tuple[UUID, ...] = field(default_factory=tuple)

    @classmethod
    def from_post(cls, post: Post, category_ids=()) -> PostDTO:
        return cls(
            id=post.id,
            title=post.title,
            slug=post.slug,
            content=post.content,
            excerpt=post.excerpt,
            image_url=post.image_url,
            published=post.published,
            author_id=post.author_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
            category_ids=tuple(category_ids),
        )


@dataclass(frozen=True)
class AuthorDTO:
    """Public part of a user profile."""

    id: str
    full_name: Optional[str]
    avatar_url: Optional[str]

    @classmethod
    def from_user(cls, user: User) -> AuthorDTO:
        return cls(id=user.id, full_name=user.full_name, avatar_url=user.avatar_url)


@dataclass(frozen=True)
class PostDetailDTO:
    post: PostDTO
    author: Optional[AuthorDTO]


@dataclass(frozen=True)
class FeedPageDTO:
    """One page of the public feed."""

    items: list[PostDTO]
    total: int
    page: int
    page_size: int

    @property
    def pages(self) -> int:
        return max(1, math.ceil(self.total / self.page_size))
