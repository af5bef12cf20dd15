"""Principal - the authenticated caller as seen by the application.

The presentation layer builds it from a verified provider token. The
application never looks at tokens itself.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Principal:
    """Immutable identity of the caller, as asserted by the auth provider."""

    id: str
    email: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None

    def __str__(self) -> str:
        return f"Principal({self.email})"
