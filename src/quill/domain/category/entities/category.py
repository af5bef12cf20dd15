"""Category entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from quill.domain.category.value_objects.category_changes import CategoryChanges
from quill.domain.shared.exceptions import ErrorCode, ValidationError
from quill.domain.shared.slug import slugify
from quill.domain.shared.time import advance_timestamp, ensure_tz_aware, utc_now
from quill.domain.shared.unset import is_set

MAX_NAME_LENGTH = 100
MAX_SLUG_LENGTH = 120
MAX_DESCRIPTION_LENGTH = 500


class Category:
    """
    A topic label posts can be filed under.

    Categories are shared by all authors. The slug is derived from the name
    and is only re-derived when the name actually changes. Uniqueness of name
    and slug is enforced at command level and by the datastore.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        description: Optional[str] = None,
        id: Optional[UUID] = None,
        slug: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        """
        Initialize a category.

        Parameters
        ----------
        name
            Display name, 1..100 characters
        description
            Optional free text, at most 500 characters
        id
            Category ID (generated if not provided, used for reconstitution)
        slug
            Stored slug (derived from ``name`` if not provided)
        created_at
            Creation timestamp (defaults to now, used for reconstitution)
        updated_at
            Last modification timestamp (defaults to ``created_at``)
        """
        self._name = self._validate_name(name)
        self._description = self._validate_description(description)
        self._id = id if id is not None else uuid4()
        self._slug = slug or slugify(self._name, max_length=MAX_SLUG_LENGTH)
        self._created_at = ensure_tz_aware(created_at) if created_at else utc_now()
        self._updated_at = (
            ensure_tz_aware(updated_at) if updated_at else self._created_at
        )

    @classmethod
    def create(cls, name: str, description: Optional[str] = None) -> "Category":
        return cls(name=name, description=description)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        slug: str,
        description: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Category":
        return cls(
            id=id,
            name=name,
            slug=slug,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def slug(self) -> str:
        return self._slug

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def apply(self, changes: CategoryChanges) -> None:
        """Apply a partial update; ``updated_at`` is refreshed even if empty.

        Every supplied field is validated before any of them is assigned.
        """
        name = (
            self._validate_name(changes.name) if is_set(changes.name) else self._name
        )
        description = (
            self._validate_description(changes.description)
            if is_set(changes.description)
            else self._description
        )

        self.rename(name)
        self._description = description
        self._updated_at = advance_timestamp(self._updated_at)

    def rename(self, new_name: str) -> None:
        new_name = self._validate_name(new_name)
        if new_name == self._name:
            return
        self._name = new_name
        self._slug = slugify(new_name, max_length=MAX_SLUG_LENGTH)

    @staticmethod
    def _validate_name(name: Optional[str]) -> str:
        if not name or not name.strip():
            msg = "Category name cannot be empty"
            raise ValidationError(msg, code=ErrorCode.INVALID_CATEGORY_NAME)
        name = name.strip()
        if len(name) > MAX_NAME_LENGTH:
            msg = f"Category name cannot exceed {MAX_NAME_LENGTH} characters"
            raise ValidationError(msg, code=ErrorCode.INVALID_CATEGORY_NAME)
        return name

    @staticmethod
    def _validate_description(description: Optional[str]) -> Optional[str]:
        if description is None:
            return None
        if len(description) > MAX_DESCRIPTION_LENGTH:
            msg = f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters"
            raise ValidationError(msg, code=ErrorCode.INVALID_DESCRIPTION)
        return description.strip() or None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Category):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Category(id={self._id}, slug={self._slug!r})"
