from datetime import datetime
from typing import Optional, Union

from quill.domain.shared.exceptions import ValidationError
from quill.domain.shared.time import advance_timestamp, ensure_tz_aware, utc_now
from quill.domain.user.value_objects.email import Email

MAX_FULL_NAME_LENGTH = 255


class User:
    """
    User aggregate root.

    Mirrors a principal of the external identity provider. The ID is the
    provider's opaque subject identifier and never changes; profile fields
    are refreshed from the provider on every authenticated write.
    """

    def __init__(  # NOQA: PLR0913
        self,
        id: str,
        email: Union[str, Email],
        full_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        if not id:
            msg = "User id cannot be empty"
            raise ValidationError(msg)
        self._id = id
        self._email = email if isinstance(email, Email) else Email(email)
        self._full_name = self._validate_full_name(full_name)
        self._avatar_url = avatar_url or None
        self._created_at = ensure_tz_aware(created_at) if created_at else utc_now()
        self._updated_at = (
            ensure_tz_aware(updated_at) if updated_at else self._created_at
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def full_name(self) -> Optional[str]:
        return self._full_name

    @property
    def avatar_url(self) -> Optional[str]:
        return self._avatar_url

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def refresh_profile(
        self,
        email: Union[str, Email],
        full_name: Optional[str],
        avatar_url: Optional[str],
    ) -> None:
        # Provider values always win, including clearing name/avatar.
        self._email = email if isinstance(email, Email) else Email(email)
        self._full_name = self._validate_full_name(full_name)
        self._avatar_url = avatar_url or None
        self._updated_at = advance_timestamp(self._updated_at)

    @staticmethod
    def _validate_full_name(full_name: Optional[str]) -> Optional[str]:
        if full_name and len(full_name) > MAX_FULL_NAME_LENGTH:
            msg = f"Full name cannot exceed {MAX_FULL_NAME_LENGTH} characters"
            raise ValidationError(msg)
        return full_name or None

    @classmethod
    def create(
        cls,
        id: str,
        email: Union[str, Email],
        full_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> "User":
        return cls(id=id, email=email, full_name=full_name, avatar_url=avatar_url)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: str,
        email: Union[str, Email],
        full_name: Optional[str],
        avatar_url: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            full_name=full_name,
            avatar_url=avatar_url,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
