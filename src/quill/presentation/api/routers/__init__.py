"""API routers."""

from quill.presentation.api.routers.categories import router as categories_router
from quill.presentation.api.routers.posts import router as posts_router
from quill.presentation.api.routers.users import router as users_router

__all__ = ["categories_router", "posts_router", "users_router"]
