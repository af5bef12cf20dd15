"""Shared pytest fixtures for all test suites."""

from tests.shared.fixtures.database import (
    async_engine,
    postgres_container,
    session_maker,
)
from tests.shared.fixtures.identities import (
    AUTHOR,
    AUTHOR_EMAIL,
    AUTHOR_ID,
    OTHER_AUTHOR,
    OTHER_AUTHOR_EMAIL,
    OTHER_AUTHOR_ID,
)

__all__ = [
    "AUTHOR",
    "AUTHOR_EMAIL",
    "AUTHOR_ID",
    "OTHER_AUTHOR",
    "OTHER_AUTHOR_EMAIL",
    "OTHER_AUTHOR_ID",
    "async_engine",
    "postgres_container",
    "session_maker",
]
