"""Pydantic schemas for the REST API."""

from quill.presentation.api.schemas.categories import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)
from quill.presentation.api.schemas.common import ErrorResponse, HealthResponse
from quill.presentation.api.schemas.posts import (
    FeedResponse,
    PostCreateRequest,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
    PostUpdateRequest,
)
from quill.presentation.api.schemas.users import (
    AuthorResponse,
    DashboardStatsResponse,
    UserResponse,
    UserUpsertRequest,
)

__all__ = [
    "AuthorResponse",
    "CategoryCreateRequest",
    "CategoryResponse",
    "CategoryUpdateRequest",
    "DashboardStatsResponse",
    "ErrorResponse",
    "FeedResponse",
    "HealthResponse",
    "PostCreateRequest",
    "PostDetailResponse",
    "PostListResponse",
    "PostResponse",
    "PostUpdateRequest",
    "UserResponse",
    "UserUpsertRequest",
]
