from dataclasses import dataclass


@dataclass(frozen=True)
class AuthorStats:
    """Post counts for one author's dashboard."""

    total_posts: int
    published_posts: int
    categories: int
