"""Dashboard counters for the current author."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quill.domain.post import AuthorStats, PostRepository

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory
    from quill.application.ports.identity import Principal


class DashboardStatsQuery:
    """Count the principal's posts, published posts and distinct categories.

    ``categories`` counts the distinct categories linked to the principal's
    posts, not every category in the system.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        self._post_repo = post_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DashboardStatsQuery:
        return cls(post_repository=factory.post_repository())

    async def execute(self, principal: Principal) -> AuthorStats:
        return await self._post_repo.get_author_stats(principal.id)
