"""Query layer - read operations.

Queries never modify post or category state. ``GetCurrentUserQuery`` is the
one exception on the user side: reading the current user provisions it.
"""

from quill.application.queries.category import ListCategoriesQuery
from quill.application.queries.post import (
    BrowseFeedQuery,
    GetPostBySlugQuery,
    ListPostsQuery,
)
from quill.application.queries.user import (
    DashboardStatsQuery,
    GetCurrentUserQuery,
    GetUserByIdQuery,
)

__all__ = [
    "BrowseFeedQuery",
    "DashboardStatsQuery",
    "GetCurrentUserQuery",
    "GetPostBySlugQuery",
    "GetUserByIdQuery",
    "ListCategoriesQuery",
    "ListPostsQuery",
]
