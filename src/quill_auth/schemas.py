"""Data classes produced by token verification."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class TokenPayload:
    """Decoded claims of a provider-issued access token."""

    subject: str
    email: str
    exp: datetime
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None

    def is_expired(self, now: datetime) -> bool:
        return now >= self.exp
