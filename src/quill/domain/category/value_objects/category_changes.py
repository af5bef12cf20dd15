"""Partial update of a category."""

from dataclasses import dataclass
from typing import Optional

from quill.domain.shared.unset import UNSET, Maybe, is_set


@dataclass(frozen=True)
class CategoryChanges:
    """Fields to change on a category; ``UNSET`` leaves a field untouched.

    ``description=None`` clears the description.
    """

    name: Maybe[str] = UNSET
    description: Maybe[Optional[str]] = UNSET

    def is_empty(self) -> bool:
        return not (is_set(self.name) or is_set(self.description))
