# tests/conftest.py
"""
Pytest configuration and fixtures.

Every test gets its own store file under tmp_path, initialized the same
way the API and CLI initialize the real one.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Set test environment
os.environ.setdefault("ENVIRONMENT", "test")

from promptvault.database import create_session_factory, create_store_engine, get_db, init_db  # noqa: E402
from promptvault.main import app  # noqa: E402


@pytest.fixture
def engine(tmp_path):
    """Initialized store engine backed by a temporary SQLite file."""
    engine = create_store_engine(f"sqlite:///{tmp_path / 'prompts.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def db(session_factory):
    """Store session for service-level tests."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """Create test client bound to the temporary store."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
