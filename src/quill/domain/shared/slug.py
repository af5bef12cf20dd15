"""URL slug generation.

Slugs are derived from human-readable titles and names. The generator does
not guarantee uniqueness; callers rely on the unique columns for that.
"""

import hashlib
import re
import unicodedata
from typing import Optional

_DISALLOWED = re.compile(r"[^a-z0-9\s_-]")
_SEPARATORS = re.compile(r"[\s_-]+")

FALLBACK_PREFIX = "untitled"


def slugify(text: str, max_length: Optional[int] = None) -> str:
    """Map arbitrary text to a lowercase, hyphen-separated ASCII slug.

    >>> slugify("TypeScript Best Practices in 2025")
    'typescript-best-practices-in-2025'
    >>> slugify("Crème Brûlée!")
    'creme-brulee'

    Text that reduces to nothing (only punctuation, emoji, non-Latin
    scripts) maps to ``untitled-<hash>`` so the result is never empty and
    stays deterministic.
    """
    ascii_text = (
        unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    )
    slug = _DISALLOWED.sub("", ascii_text.lower())
    slug = _SEPARATORS.sub("-", slug).strip("-")

    if not slug:
        digest = hashlib.sha1(text.encode("utf-8")).hexdigest()[:8]
        slug = f"{FALLBACK_PREFIX}-{digest}"

    if max_length is not None and len(slug) > max_length:
        slug = slug[:max_length].rstrip("-")

    return slug
