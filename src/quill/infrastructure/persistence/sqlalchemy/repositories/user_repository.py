"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

import logging
from typing import Optional, Union

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.shared.exceptions import InternalError
from quill.domain.user import Email, EmailAlreadyExistsError, User, UserRepository
from quill.infrastructure.persistence.sqlalchemy.models import UserModel
from quill.infrastructure.persistence.sqlalchemy.repositories._utils import (
    integrity_message,
    violates,
)

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of user repository.

    ``save`` is an upsert keyed on the provider id, so two requests that
    provision the same principal at the same time both succeed.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_id(self, user_id: str) -> Optional[User]:
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        normalized = email if isinstance(email, Email) else Email(email)
        stmt = select(UserModel).where(UserModel.email == normalized.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def save(self, user: User) -> None:
        values = {
            "id": user.id,
            "email": user.email,
            "full_name": user.full_name,
            "avatar_url": user.avatar_url,
            "created_at": user.created_at,
            "updated_at": user.updated_at,
        }
        try:
            await self._upsert(values)
        except IntegrityError as exc:
            await self._session.rollback()
            msg = integrity_message(exc)
            if violates(msg, "uq_users_email", "users", "email"):
                raise EmailAlreadyExistsError(user.email) from exc
            error_msg = "Failed to save user due to database constraint"
            raise InternalError(error_msg, details={"error": msg}) from exc

        logger.debug("User saved: %s", user.id)

    async def delete(self, user_id: str) -> None:
        await self._session.execute(delete(UserModel).where(UserModel.id == user_id))
        await self._session.flush()
        logger.info("User deleted: %s", user_id)

    async def _upsert(self, values: dict) -> None:
        dialect = self._session.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)

        if insert is None:
            await self._session.merge(UserModel(**values))
            await self._session.flush()
            return

        stmt = insert(UserModel).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[UserModel.id],
            set_={
                "email": stmt.excluded.email,
                "full_name": stmt.excluded.full_name,
                "avatar_url": stmt.excluded.avatar_url,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self._session.execute(stmt)

    @staticmethod
    def _map_to_domain(model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            full_name=model.full_name,
            avatar_url=model.avatar_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
