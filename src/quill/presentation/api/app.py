"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quill.infrastructure.persistence.sqlalchemy.engine import (
    create_engine,
    create_session_maker,
)
from quill.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    display_url,
)
from quill.presentation.api.exception_handlers import setup_exception_handlers
from quill.presentation.api.routers import (
    categories_router,
    posts_router,
    users_router,
)
from quill.presentation.api.schemas.common import HealthResponse
from quill_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the quill application with:
    - Console output with timestamps and module names
    - Configurable log level for quill modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("quill").setLevel(log_level)
    logging.getLogger("quill_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Posts",
        "description": """Blog posts and their categories.

**States:**
- `draft`: only visible through author-filtered listings
- `published`: visible in the public feed

**Ownership:** only the author can update or delete a post.
""",
    },
    {
        "name": "Categories",
        "description": "Shared categories. A category in use cannot be deleted.",
    },
    {
        "name": "Users",
        "description": "The caller's profile, public profiles and dashboard stats.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Quill API v%s...", API_VERSION)
    logger.info("Database: %s", display_url(app.state.settings.database_url))
    await create_tables(app.state.engine)
    yield

    # Shutdown - dispose the engine and its connection pool
    logger.info("Shutting down Quill API...")
    await app.state.engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()

    v1_router.include_router(posts_router, prefix="/posts", tags=["Posts"])
    v1_router.include_router(
        categories_router,
        prefix="/categories",
        tags=["Categories"],
    )
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance. The database engine is
    created here and disposed when the application shuts down.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="A **multi-author blogging** backend with categories and a public feed.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    engine = create_engine(settings.database_url, echo=settings.debug)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    # Include versioned API router
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint.

        Unversioned for load balancer/monitoring compatibility.
        """
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            api_versions=["v1"],
        )

    # Root endpoint with API info
    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "posts": f"{API_V1_PREFIX}/posts",
                "categories": f"{API_V1_PREFIX}/categories",
                "users": f"{API_V1_PREFIX}/users",
            },
        }

    return app
