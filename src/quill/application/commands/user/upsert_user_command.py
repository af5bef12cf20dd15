"""Create or update the current user's profile."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from quill.application.services import IdentityResolver
from quill.domain.shared.unset import UNSET, Maybe, is_set
from quill.domain.user import User

if TYPE_CHECKING:
    from quill.application.factories import RepositoryFactory
    from quill.application.ports.identity import Principal


class UpsertUserCommand:
    """Provision the principal, optionally overriding name and avatar."""

    def __init__(self, identity_resolver: IdentityResolver):
        self._identity_resolver = identity_resolver

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpsertUserCommand:
        return cls(identity_resolver=IdentityResolver.from_factory(factory))

    async def execute(
        self,
        principal: Principal,
        full_name: Maybe[Optional[str]] = UNSET,
        avatar_url: Maybe[Optional[str]] = UNSET,
    ) -> User:
        if is_set(full_name):
            principal = replace(principal, full_name=full_name)
        if is_set(avatar_url):
            principal = replace(principal, avatar_url=avatar_url)
        return await self._identity_resolver.ensure_user(principal)
