"""Pytest fixtures for API tests.

The application owns its engine, so each test gets a fresh SQLite file and
the app's own lifespan creates the schema. Requests carry tokens minted
with the same shared secret the app verifies against.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from quill.presentation.api.app import API_V1_PREFIX, create_app
from quill_auth import ProviderTokenService
from quill_config.settings import Settings
from tests.shared.fixtures.identities import AUTHOR, OTHER_AUTHOR

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings backed by a throwaway SQLite file."""
    return Settings(
        auth_jwt_secret=SecretStr(TEST_JWT_SECRET),
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'quill-api.db'}",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        feed_page_size=4,
    )


@pytest.fixture
def test_client(api_settings):
    """Client with the lifespan running (tables created, engine disposed)."""
    app = create_app(settings=api_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def token_service() -> ProviderTokenService:
    return ProviderTokenService(secret_key=TEST_JWT_SECRET)


def _headers_for(token_service: ProviderTokenService, principal) -> dict[str, str]:
    token = token_service.create_access_token(
        subject=principal.id,
        email=principal.email,
        full_name=principal.full_name,
        avatar_url=principal.avatar_url,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(token_service) -> dict[str, str]:
    """Bearer header for the primary test author."""
    return _headers_for(token_service, AUTHOR)


@pytest.fixture
def other_auth_headers(token_service) -> dict[str, str]:
    """Bearer header for a second author."""
    return _headers_for(token_service, OTHER_AUTHOR)
