"""Post aggregate."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from quill.domain.post.value_objects.post_changes import PostChanges
from quill.domain.shared.exceptions import ErrorCode, ValidationError
from quill.domain.shared.slug import slugify
from quill.domain.shared.time import advance_timestamp, ensure_tz_aware, utc_now
from quill.domain.shared.unset import is_set

MAX_TITLE_LENGTH = 200
MAX_SLUG_LENGTH = 250
MAX_EXCERPT_LENGTH = 500


class Post:
    """
    Post aggregate root.

    A post has exactly one author, fixed at creation. Its slug follows the
    title: it is derived on creation and re-derived whenever the title is
    changed. Publishing is a plain flag; drafts and published posts can move
    either way at any time.

    Category associations are not part of the aggregate state; they are
    managed through ``PostRepository.replace_categories``.
    """

    def __init__(  # NOQA: PLR0913
        self,
        title: str,
        content: str,
        author_id: str,
        excerpt: Optional[str] = None,
        image_url: Optional[str] = None,
        published: bool = False,
        id: Optional[UUID] = None,
        slug: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        if not author_id:
            msg = "Post must have an author"
            raise ValidationError(msg)
        self._title = self._validate_title(title)
        self._content = self._validate_content(content)
        self._excerpt = self._validate_excerpt(excerpt)
        self._image_url = image_url or None
        self._published = bool(published)
        self._author_id = author_id
        self._id = id if id is not None else uuid4()
        self._slug = slug or slugify(self._title, max_length=MAX_SLUG_LENGTH)
        self._created_at = ensure_tz_aware(created_at) if created_at else utc_now()
        self._updated_at = (
            ensure_tz_aware(updated_at) if updated_at else self._created_at
        )

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        title: str,
        content: str,
        author_id: str,
        excerpt: Optional[str] = None,
        image_url: Optional[str] = None,
        published: bool = False,
    ) -> "Post":
        return cls(
            title=title,
            content=content,
            author_id=author_id,
            excerpt=excerpt,
            image_url=image_url,
            published=published,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        title: str,
        slug: str,
        content: str,
        author_id: str,
        excerpt: Optional[str],
        image_url: Optional[str],
        published: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Post":
        return cls(
            id=id,
            title=title,
            slug=slug,
            content=content,
            author_id=author_id,
            excerpt=excerpt,
            image_url=image_url,
            published=published,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def slug(self) -> str:
        return self._slug

    @property
    def content(self) -> str:
        return self._content

    @property
    def excerpt(self) -> Optional[str]:
        return self._excerpt

    @property
    def image_url(self) -> Optional[str]:
        return self._image_url

    @property
    def published(self) -> bool:
        return self._published

    @property
    def author_id(self) -> str:
        return self._author_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_authored_by(self, user_id: str) -> bool:
        return self._author_id == user_id

    def apply(self, changes: PostChanges) -> None:
        """Apply a partial update.

        All supplied fields are validated before any of them is assigned, so
        a rejected update leaves the post untouched. ``updated_at`` is
        refreshed even when ``changes`` is empty.
        """
        title = (
            self._validate_title(changes.title)
            if is_set(changes.title)
            else self._title
        )
        content = (
            self._validate_content(changes.content)
            if is_set(changes.content)
            else self._content
        )
        excerpt = (
            self._validate_excerpt(changes.excerpt)
            if is_set(changes.excerpt)
            else self._excerpt
        )

        if title != self._title:
            self._title = title
            self._slug = slugify(title, max_length=MAX_SLUG_LENGTH)
        self._content = content
        self._excerpt = excerpt
        if is_set(changes.image_url):
            self._image_url = changes.image_url or None
        if is_set(changes.published):
            self._published = bool(changes.published)
        self._updated_at = advance_timestamp(self._updated_at)

    def publish(self) -> None:
        self.apply(PostChanges(published=True))

    def unpublish(self) -> None:
        self.apply(PostChanges(published=False))

    @staticmethod
    def _validate_title(title: Optional[str]) -> str:
        if not title or not title.strip():
            msg = "Title cannot be empty"
            raise ValidationError(msg, code=ErrorCode.INVALID_TITLE)
        title = title.strip()
        if len(title) > MAX_TITLE_LENGTH:
            msg = f"Title cannot exceed {MAX_TITLE_LENGTH} characters"
            raise ValidationError(msg, code=ErrorCode.INVALID_TITLE)
        return title

    @staticmethod
    def _validate_content(content: Optional[str]) -> str:
        if not content or not content.strip():
            msg = "Content cannot be empty"
            raise ValidationError(msg, code=ErrorCode.INVALID_CONTENT)
        return content

    @staticmethod
    def _validate_excerpt(excerpt: Optional[str]) -> Optional[str]:
        if excerpt is None:
            return None
        if len(excerpt) > MAX_EXCERPT_LENGTH:
            msg = f"Excerpt cannot exceed {MAX_EXCERPT_LENGTH} characters"
            raise ValidationError(msg, code=ErrorCode.INVALID_EXCERPT)
        return excerpt or None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Post):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        state = "published" if self._published else "draft"
        return f"Post(id={self._id}, slug={self._slug!r}, {state})"
