"""Query to get the current user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quill.application.services import IdentityResolver
from quill.domain.user import User

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory
    from quill.application.ports.identity import Principal


class GetCurrentUserQuery:
    """Return the local user for the principal, provisioning it if needed."""

    def __init__(self, identity_resolver: IdentityResolver) -> None:
        self._identity_resolver = identity_resolver

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetCurrentUserQuery:
        return cls(identity_resolver=IdentityResolver.from_factory(factory))

    async def execute(self, principal: Principal) -> User:
        return await self._identity_resolver.ensure_user(principal)
