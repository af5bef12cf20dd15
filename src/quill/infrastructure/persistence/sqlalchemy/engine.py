"""Async engine and session maker construction.

The engine is owned by whoever creates it (the API lifespan, the CLI, a
test fixture) and is passed down from there.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for ``database_url``.

    SQLite connections get ``PRAGMA foreign_keys = ON`` so cascades behave
    as they do on PostgreSQL.
    """
    is_sqlite = database_url.startswith("sqlite")
    engine = create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=not is_sqlite,
    )

    if is_sqlite:

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):  # noqa: ARG001
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()

    return engine


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
