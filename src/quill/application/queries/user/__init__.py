"""User queries."""

from quill.application.queries.user.dashboard_stats_query import (
    DashboardStatsQuery,
)
from quill.application.queries.user.get_current_user_query import (
    GetCurrentUserQuery,
)
from quill.application.queries.user.get_user_by_id_query import GetUserByIdQuery

__all__ = ["DashboardStatsQuery", "GetCurrentUserQuery", "GetUserByIdQuery"]
