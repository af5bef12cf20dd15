"""Post queries."""

from quill.application.queries.post.browse_feed_query import BrowseFeedQuery
from quill.application.queries.post.get_post_by_slug_query import (
    GetPostBySlugQuery,
)
from quill.application.queries.post.list_posts_query import ListPostsQuery

__all__ = ["BrowseFeedQuery", "GetPostBySlugQuery", "ListPostsQuery"]
