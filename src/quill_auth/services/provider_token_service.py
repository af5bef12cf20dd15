"""Provider token service.

Verifies access tokens issued by the external identity provider. Tokens
follow the common hosted-auth layout: ``sub`` is the opaque user id,
``email`` is top-level and profile data lives under ``user_metadata``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from quill_auth.exceptions import InvalidTokenError
from quill_auth.schemas import TokenPayload


class ProviderTokenService:
    """Service for verifying (and, for development, issuing) provider tokens.

    Examples
    --------
    >>> service = ProviderTokenService(secret_key="your-secret-key")
    >>> token = service.create_access_token("user-1", "user@example.com")
    >>> payload = service.verify_token(token)
    >>> print(payload.subject)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 1
    DEFAULT_AUDIENCE = "authenticated"
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        audience: str = DEFAULT_AUDIENCE,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the token service.

        Parameters
        ----------
        secret_key
            Shared secret the provider signs tokens with.
        audience
            Expected ``aud`` claim.
        access_token_expire_hours
            Lifetime of tokens minted by :meth:`create_access_token`.
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._audience = audience
        self._access_expire = timedelta(hours=access_token_expire_hours)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a provider token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                audience=self._audience,
            )

            subject = str(payload["sub"])
            email = payload["email"]
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
            metadata = payload.get("user_metadata") or {}

            if not subject or not email:
                msg = "Token is missing subject or email"
                raise ValueError(msg)

            return TokenPayload(
                subject=subject,
                email=email,
                exp=exp,
                full_name=metadata.get("full_name"),
                avatar_url=metadata.get("avatar_url"),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, AttributeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    def create_access_token(
        self,
        subject: str,
        email: str,
        full_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Mint a token shaped like the provider's.

        Used by the CLI and tests; production tokens come from the provider.
        """
        now = datetime.now(tz=timezone.utc)
        metadata: dict[str, Any] = {}
        if full_name is not None:
            metadata["full_name"] = full_name
        if avatar_url is not None:
            metadata["avatar_url"] = avatar_url

        payload = {
            "sub": subject,
            "email": email,
            "aud": self._audience,
            "role": "authenticated",
            "user_metadata": metadata,
            "iat": now,
            "exp": now + (expires_delta or self._access_expire),
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
