"""Root pytest configuration for test discovery and auto-skip behavior.

All tests are collected, but tests that need Docker (Testcontainers
PostgreSQL) are auto-skipped unless explicitly enabled.

Test Structure:
    tests/
    ├── unit/            # Fast tests: domain, commands (mocked), SQLite, API
    ├── integration/     # Tests with Testcontainers PostgreSQL
    └── shared/          # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests

Pytest Options:
    --run-integration    Run integration tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from quill_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")

# Settings cannot be built without a signing secret
os.environ.setdefault("AUTH_JWT_SECRET", "test-jwt-secret-for-testing-only")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need a PostgreSQL container (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    run_integration = config.getoption("--run-integration") or os.environ.get(
        "RUN_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def clear_settings_cache_fixture():
    """Make every test start from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
