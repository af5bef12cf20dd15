"""Partial update of a post."""

from dataclasses import dataclass
from typing import Optional

from quill.domain.shared.unset import UNSET, Maybe, is_set


@dataclass(frozen=True)
class PostChanges:
    """Fields to change on a post; ``UNSET`` leaves a field untouched.

    ``excerpt`` and ``image_url`` are nullable: ``None`` clears them.
    """

    title: Maybe[str] = UNSET
    content: Maybe[str] = UNSET
    excerpt: Maybe[Optional[str]] = UNSET
    image_url: Maybe[Optional[str]] = UNSET
    published: Maybe[bool] = UNSET

    def is_empty(self) -> bool:
        return not any(
            is_set(value)
            for value in (
                self.title,
                self.content,
                self.excerpt,
                self.image_url,
                self.published,
            )
        )
