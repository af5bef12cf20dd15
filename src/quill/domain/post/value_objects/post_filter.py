"""Filters for listing and browsing posts."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from quill.domain.post.exceptions import InvalidLimitError, InvalidPageError

DEFAULT_LIMIT = 50
MIN_LIMIT = 1
MAX_LIMIT = 100


@dataclass(frozen=True)
class PostFilter:
    """Predicates for ``PostRepository.find_with_filter``.

    Every predicate is optional and they combine with AND. Results are
    always ordered newest first and capped at ``limit``.
    """

    published: Optional[bool] = None
    author_id: Optional[str] = None
    category_id: Optional[UUID] = None
    limit: int = DEFAULT_LIMIT

    def __post_init__(self):
        if not MIN_LIMIT <= self.limit <= MAX_LIMIT:
            raise InvalidLimitError(self.limit, MIN_LIMIT, MAX_LIMIT)


@dataclass(frozen=True)
class FeedQuery:
    """Public browse view: published posts, optional category and search."""

    category_id: Optional[UUID] = None
    search: Optional[str] = None
    page: int = 1
    page_size: int = 4

    def __post_init__(self):
        if self.page < 1:
            raise InvalidPageError("page", self.page)
        if not MIN_LIMIT <= self.page_size <= MAX_LIMIT:
            raise InvalidLimitError(self.page_size, MIN_LIMIT, MAX_LIMIT)
        # Blank search means no search
        if self.search is not None and not self.search.strip():
            object.__setattr__(self, "search", None)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size
