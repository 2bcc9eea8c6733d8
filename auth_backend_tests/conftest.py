"""
Pytest configuration for auth backend tests.

Points the app at a throwaway SQLite file and a cheap bcrypt cost before
any ``auth_backend`` module reads its settings.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_auth_backend.db")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret-key-long-enough-for-hs256-signing")
os.environ.setdefault("ENVIRONMENT", "production")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from auth_backend.db import Base, engine
from auth_backend.main import app


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """Create a database session for testing."""
    session = Session(bind=engine)
    yield session
    session.close()
