"""Authentication services."""

from quill_auth.services.provider_token_service import ProviderTokenService

__all__ = ["ProviderTokenService"]
