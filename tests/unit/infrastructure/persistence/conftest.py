"""
Pytest fixtures for infrastructure persistence tests.

Each test gets a fresh SQLite database file (through the application's own
engine factory, so foreign keys are enforced) with two users already
provisioned. Tests against PostgreSQL live under tests/integration.
"""

from datetime import datetime, timezone

import pytest
import pytest_asyncio

from quill.infrastructure.persistence.sqlalchemy.engine import (
    create_engine,
    create_session_maker,
)
from quill.infrastructure.persistence.sqlalchemy.init_db import create_tables
from quill.infrastructure.persistence.sqlalchemy.models import UserModel
from quill.infrastructure.persistence.sqlalchemy.repositories import (
    CategoryRepositorySQLAlchemy,
    PostRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures.identities import (
    AUTHOR_EMAIL,
    AUTHOR_ID,
    OTHER_AUTHOR_EMAIL,
    OTHER_AUTHOR_ID,
)


def _create_test_user(user_id: str, email: str) -> UserModel:
    """Create a test user model with all required fields."""
    now = datetime.now(tz=timezone.utc)
    return UserModel(
        id=user_id,
        email=email,
        full_name=None,
        avatar_url=None,
        created_at=now,
        updated_at=now,
    )


@pytest_asyncio.fixture
async def async_engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'quill-test.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(async_engine):
    """Session with both test authors already stored."""
    session_maker = create_session_maker(async_engine)
    async with session_maker() as session:
        session.add(_create_test_user(AUTHOR_ID, AUTHOR_EMAIL))
        session.add(_create_test_user(OTHER_AUTHOR_ID, OTHER_AUTHOR_EMAIL))
        await session.commit()

        yield session

        await session.rollback()


@pytest.fixture
def post_repository(async_session):
    return PostRepositorySQLAlchemy(async_session)


@pytest.fixture
def category_repository(async_session):
    return CategoryRepositorySQLAlchemy(async_session)


@pytest.fixture
def user_repository(async_session):
    return UserRepositorySQLAlchemy(async_session)


@pytest.fixture
def repository_factory(async_session):
    return SQLAlchemyRepositoryFactory(session=async_session)
