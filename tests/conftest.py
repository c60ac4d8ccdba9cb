"""
Shared test fixtures.

Each test gets its own SQLite database file so that no state leaks
between tests.
"""

import pytest
from fastapi.testclient import TestClient

from todo_api.config import Settings
from todo_api.database import Database
from todo_api.main import create_app


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway database, logging to the console only."""
    return Settings(
        SQLALCHEMY_DATABASE_URI=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        LOG_TO_FILE=False,
        BACKEND_CORS_ORIGINS="",
    )


@pytest.fixture
def client(test_settings):
    """Test client fixture; entering it runs the startup sequence."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register a user and return their API key."""

    def _register(username: str) -> str:
        response = client.post("/register", json={"username": username})
        assert response.status_code == 200
        return response.json()["data"]["api_key"]

    return _register


@pytest.fixture
def auth_headers(register):
    """Return authentication headers for a freshly registered user."""
    return {"Authorization": register("alice")}


@pytest.fixture
async def database(tmp_path):
    """Storage handle on a fresh database with the schema in place."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'crud.db'}")
    await db.sync_schema()
    yield db
    await db.dispose()


@pytest.fixture
async def db(database):
    """Create test database session."""
    async with database.session() as session:
        yield session
