"""Local provisioning of identity-provider principals."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quill.domain.shared.exceptions import ValidationError
from quill.domain.user import User, UserRepository

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory
    from quill.application.ports.identity import Principal

logger = logging.getLogger(__name__)


class IdentityResolver:
    """
    Make sure a local user row exists for a principal.

    The auth provider is the source of truth for email, name and avatar, so
    an existing row is overwritten with the principal's current values.
    Calling ``ensure_user`` any number of times for the same principal
    converges on the same row.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> IdentityResolver:
        return cls(user_repository=factory.user_repository())

    async def ensure_user(self, principal: Principal) -> User:
        """Insert or refresh the user row for ``principal``.

        Raises
        ------
        ValidationError
            If the principal has no id or no email. Raised before any
            datastore access.
        """
        if not principal.id:
            msg = "Principal has no id"
            raise ValidationError(msg)
        if not principal.email:
            msg = "Principal has no email"
            raise ValidationError(msg)

        user = await self._user_repo.find_by_id(principal.id)
        if user is None:
            user = User.create(
                id=principal.id,
                email=principal.email,
                full_name=principal.full_name,
                avatar_url=principal.avatar_url,
            )
            logger.info("Provisioning local user %s", principal.id)
        else:
            user.refresh_profile(
                email=principal.email,
                full_name=principal.full_name,
                avatar_url=principal.avatar_url,
            )

        await self._user_repo.save(user)
        return user
