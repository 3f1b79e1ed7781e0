# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds a fresh application (and therefore a fresh item store) per test
# - Passes an explicit Settings instance instead of relying on the global one
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# items_api.config.settings creates the global settings on import

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from items_api.api.main import create_application
from items_api.config.settings import Settings
from items_api.shared.repositories.item_store import ItemStore
from items_api.shared.utils.constants import API_KEY_HEADER

TEST_API_KEY = "test-api-key"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    """Settings used by the application under test."""
    return Settings(
        API_KEY=TEST_API_KEY,
        APP_ENV="test",
        ITEM_ID_START=1000,
        STORE_SHARD_COUNT=8,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Fresh application with an empty store."""
    return create_application(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client for the application."""
    return TestClient(app)


@pytest.fixture
def store(app: FastAPI) -> ItemStore:
    """The item store owned by the application under test."""
    return app.state.item_store


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Headers carrying the correct admin key."""
    return {API_KEY_HEADER: TEST_API_KEY}
