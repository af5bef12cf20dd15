"""Application factories."""

from quill.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
