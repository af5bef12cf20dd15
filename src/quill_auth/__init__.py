"""Quill Auth - verification of identity-provider tokens.

Quill never stores passwords or runs OAuth flows. The external identity
provider signs a JWT for every session; this package verifies it and
exposes the claims Quill cares about.

Architecture:
    quill_auth/
    ├── services/           # Token verification (and dev token minting)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from quill_auth import ProviderTokenService

    service = ProviderTokenService(secret_key="...")
    payload = service.verify_token(token)
"""

from quill_auth.exceptions import AuthError, InvalidTokenError
from quill_auth.schemas import TokenPayload
from quill_auth.services import ProviderTokenService

__all__ = [
    # Services
    "ProviderTokenService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
]
