"""Post domain.

Posts belong to exactly one author and carry a globally unique slug derived
from the title. Only the author may change or delete a post.
"""

from quill.domain.post.aggregates import Post
from quill.domain.post.exceptions import (
    InvalidLimitError,
    InvalidPageError,
    NotPostAuthorError,
    PostNotFoundError,
    SlugAlreadyExistsError,
)
from quill.domain.post.repositories import PostRepository
from quill.domain.post.value_objects import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MIN_LIMIT,
    AuthorStats,
    FeedQuery,
    PostChanges,
    PostFilter,
)

__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "MIN_LIMIT",
    "AuthorStats",
    "FeedQuery",
    "InvalidLimitError",
    "InvalidPageError",
    "NotPostAuthorError",
    "Post",
    "PostChanges",
    "PostFilter",
    "PostNotFoundError",
    "PostRepository",
    "SlugAlreadyExistsError",
]
