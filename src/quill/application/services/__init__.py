"""Application services."""

from quill.application.services.identity_resolver import IdentityResolver

__all__ = ["IdentityResolver"]
