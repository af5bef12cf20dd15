"""Data transfer objects returned by queries."""

from quill.application.dtos.post_dto import (
    AuthorDTO,
    FeedPageDTO,
    PostDetailDTO,
    PostDTO,
)

__all__ = ["AuthorDTO", "FeedPageDTO", "PostDTO", "PostDetailDTO"]
