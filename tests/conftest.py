"""Pytest configuration and fixtures."""

import os

# Use a throwaway database and cheap hashing before the application reads its settings
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.pop("REDIS_URL", None)

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from company_api import models  # noqa: E402, F401
from company_api.api.dependencies import get_publisher  # noqa: E402
from company_api.database import Base, get_db  # noqa: E402
from company_api.main import app  # noqa: E402

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "testpass123"  # noqa: S105


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def publisher():
    """Recording stand-in for the change-notification publisher."""
    return MagicMock()


@pytest.fixture(scope="function")
def client(db, publisher):
    """Create a test client with database and publisher overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_publisher] = lambda: publisher
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Register and sign in a user, returning the token header."""
    response = client.post(
        "/sign-up", json={"username": "tester", "password": TEST_PASSWORD}
    )
    assert response.status_code == 200

    response = client.post("/sign-in", json={"username": "tester", "password": TEST_PASSWORD})
    assert response.status_code == 200
    return {"token": response.json()["payload"]}


@pytest.fixture
def acme():
    """Valid company creation payload."""
    return {
        "name": "Acme",
        "code": "AC1",
        "country": "US",
        "website": "acme.com",
        "phone": "555",
    }
