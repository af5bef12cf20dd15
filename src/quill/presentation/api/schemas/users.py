"""User schemas for API request/response models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from quill.application.dtos import AuthorDTO
from quill.domain.post import AuthorStats
from quill.domain.user import User


class UserResponse(BaseModel):
    """The current user's own record."""

    id: str = Field(..., description="Provider-issued user ID")
    email: str = Field(..., description="Email address")
    full_name: Optional[str] = Field(None, description="Display name")
    avatar_url: Optional[str] = Field(None, description="Avatar image URL")
    created_at: datetime = Field(..., description="First seen")
    updated_at: datetime = Field(..., description="Last profile refresh")

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthorResponse(BaseModel):
    """Public profile of a user."""

    id: str = Field(..., description="User ID")
    full_name: Optional[str] = Field(None, description="Display name")
    avatar_url: Optional[str] = Field(None, description="Avatar image URL")

    @classmethod
    def from_dto(cls, dto: AuthorDTO) -> "AuthorResponse":
        return cls(id=dto.id, full_name=dto.full_name, avatar_url=dto.avatar_url)


class UserUpsertRequest(BaseModel):
    """Optional overrides of the profile values carried by the token."""

    full_name: Optional[str] = Field(None, description="Display name override")
    avatar_url: Optional[str] = Field(None, description="Avatar URL override")


class DashboardStatsResponse(BaseModel):
    total_posts: int = Field(..., description="All posts by the user")
    published_posts: int = Field(..., description="Published posts by the user")
    categories: int = Field(
        ...,
        description="Distinct categories used by the user's posts",
    )

    @classmethod
    def from_stats(cls, stats: AuthorStats) -> "DashboardStatsResponse":
        return cls(
            total_posts=stats.total_posts,
            published_posts=stats.published_posts,
            categories=stats.categories,
        )
