"""Users router: the caller's own record, public profiles and stats."""

from fastapi import APIRouter

from quill.application.commands import UpsertUserCommand
from quill.application.queries import (
    DashboardStatsQuery,
    GetCurrentUserQuery,
    GetUserByIdQuery,
)
from quill.domain.shared.unset import UNSET
from quill.presentation.api.dependencies import CurrentPrincipal, RepoFactory
from quill.presentation.api.schemas.users import (
    AuthorResponse,
    DashboardStatsResponse,
    UserResponse,
    UserUpsertRequest,
)

router = APIRouter()


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "The caller's user record"},
        401: {"description": "Authentication required"},
    },
)
async def get_current_user(
    principal: CurrentPrincipal,
    factory: RepoFactory,
) -> UserResponse:
    """Return the caller's record, creating it on first use."""
    query = GetCurrentUserQuery.from_factory(factory)

    try:
        user = await query.execute(principal)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.from_user(user)


@router.put(
    "/me",
    summary="Create or update current user",
    responses={
        200: {"description": "The caller's updated record"},
        401: {"description": "Authentication required"},
    },
)
async def upsert_current_user(
    principal: CurrentPrincipal,
    factory: RepoFactory,
    request: UserUpsertRequest | None = None,
) -> UserResponse:
    """Sync the caller's profile, optionally overriding name and avatar."""
    fields = request.model_fields_set if request else set()
    command = UpsertUserCommand.from_factory(factory)

    try:
        user = await command.execute(
            principal,
            full_name=request.full_name if "full_name" in fields else UNSET,
            avatar_url=request.avatar_url if "avatar_url" in fields else UNSET,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.from_user(user)


@router.get(
    "/me/stats",
    summary="Dashboard statistics",
    responses={
        200: {"description": "Post counts for the caller"},
        401: {"description": "Authentication required"},
    },
)
async def get_dashboard_stats(
    principal: CurrentPrincipal,
    factory: RepoFactory,
) -> DashboardStatsResponse:
    query = DashboardStatsQuery.from_factory(factory)
    stats = await query.execute(principal)
    return DashboardStatsResponse.from_stats(stats)


@router.get(
    "/{user_id}",
    summary="Get public profile",
    responses={200: {"description": "Public profile, or null if unknown"}},
)
async def get_user_by_id(
    user_id: str,
    factory: RepoFactory,
) -> AuthorResponse | None:
    query = GetUserByIdQuery.from_factory(factory)
    author = await query.execute(user_id)
    return AuthorResponse.from_dto(author) if author else None
