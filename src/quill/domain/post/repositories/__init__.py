"""Post repository interfaces."""

from quill.domain.post.repositories.post_repository import PostRepository

__all__ = ["PostRepository"]
