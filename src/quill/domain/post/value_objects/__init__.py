"""Post value objects."""

from quill.domain.post.value_objects.author_stats import AuthorStats
from quill.domain.post.value_objects.post_changes import PostChanges
from quill.domain.post.value_objects.post_filter import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MIN_LIMIT,
    FeedQuery,
    PostFilter,
)

__all__ = [
    "AuthorStats",
    "DEFAULT_LIMIT",
    "FeedQuery",
    "MAX_LIMIT",
    "MIN_LIMIT",
    "PostChanges",
    "PostFilter",
]
