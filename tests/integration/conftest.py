"""Fixtures for integration tests against a real PostgreSQL container."""

from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    postgres_container,
    session_maker,
)
