# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Provides stores, an API client and bearer tokens
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-users-api")
os.environ.setdefault("JWT_ISSUER", "users-api-test")
os.environ.setdefault("JWT_AUDIENCE", "users-api-test-clients")
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from app.auth.tokens import issue_token
from app.config import get_settings
from app.main import create_app
from lib.sql_store import SqlUserStore
from lib.user_store import InMemoryUserStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings loaded from the test environment."""
    return get_settings()


@pytest.fixture
def memory_store():
    """Empty in-memory user store."""
    return InMemoryUserStore()


@pytest.fixture
def sql_store():
    """
    SQL user store on a private in-memory SQLite database.

    StaticPool keeps a single connection so every session (and worker
    thread) sees the same database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    store = SqlUserStore(engine)
    yield store
    engine.dispose()


@pytest.fixture
def api_app(settings, memory_store):
    """Application serving the in-memory store."""
    return create_app(settings, user_store=memory_store)


@pytest.fixture
def client(api_app):
    """Test client; the context manager runs the lifespan handlers."""
    with TestClient(api_app) as test_client:
        yield test_client


@pytest.fixture
def token(settings):
    """Valid bearer token for the test settings."""
    return issue_token(settings, "test-user", email="tester@example.com")


@pytest.fixture
def auth_headers(token):
    """Authorization header carrying a valid token."""
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice():
    """Sample user payload."""
    return {"name": "Alice", "email": "a@x.com"}
