"""Post aggregates."""

from quill.domain.post.aggregates.post import (
    MAX_EXCERPT_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_TITLE_LENGTH,
    Post,
)

__all__ = ["MAX_EXCERPT_LENGTH", "MAX_SLUG_LENGTH", "MAX_TITLE_LENGTH", "Post"]
