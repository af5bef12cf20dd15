"""FastAPI dependency injection for the Quill API.

Provides dependencies for:
- Database sessions (from the engine owned by the application)
- Authentication (principal from the provider's bearer token)
- Repository factory bound to the request's session
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from quill.application.ports.identity import Principal
from quill.domain.shared.exceptions import UnauthorizedError
from quill.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from quill_auth import InvalidTokenError, ProviderTokenService, TokenPayload
from quill_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for provider-issued Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the application's
    session maker. The session is closed on every exit path; routers
    commit or roll back explicitly.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


def get_token_service(settings: AppSettings) -> ProviderTokenService:
    """Get the token service configured with the provider's shared secret."""
    return ProviderTokenService(
        secret_key=settings.auth_jwt_secret.get_secret_value(),
        audience=settings.auth_jwt_audience,
    )


TokenService = Annotated[ProviderTokenService, Depends(get_token_service)]


def _to_principal(payload: TokenPayload) -> Principal:
    return Principal(
        id=payload.subject,
        email=payload.email,
        full_name=payload.full_name,
        avatar_url=payload.avatar_url,
    )


async def get_current_principal(
    token_service: TokenService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Principal:
    """
    FastAPI dependency for routes that require an authenticated caller.

    Raises
    ------
    UnauthorizedError
        If the token is missing, invalid or expired (HTTP 401).
    """
    if credentials is None:
        raise UnauthorizedError()

    try:
        payload = token_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        msg = "Invalid or expired token"
        raise UnauthorizedError(msg) from e

    return _to_principal(payload)


# Type alias for injected principal
CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


async def get_current_principal_optional(
    token_service: TokenService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Principal | None:
    """
    Optional authentication dependency.

    Returns the principal if a valid token is provided, None otherwise.
    """
    if credentials is None:
        return None

    try:
        return await get_current_principal(token_service, credentials)
    except UnauthorizedError:
        return None


OptionalPrincipal = Annotated[
    Principal | None,
    Depends(get_current_principal_optional),
]


# -----------------------------------------------------------------------------
# Repository Factory
# -----------------------------------------------------------------------------


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Repository factory sharing the request's session (one unit of work)."""
    return SQLAlchemyRepositoryFactory(session=session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
