"""Test configuration and fixtures"""

import pytest
from httpx import ASGITransport, AsyncClient

from modern_restaurant.api.reservations import get_store
from modern_restaurant.config import Settings
from modern_restaurant.database import Database
from modern_restaurant.main import create_app
from modern_restaurant.store import ReservationStore


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        database_url=TEST_DATABASE_URL,
        log_format="console",
    )


@pytest.fixture
async def test_db():
    """Create test database"""
    database = Database(TEST_DATABASE_URL)
    await database.create_all()

    yield database

    await database.drop_all()
    await database.dispose()


@pytest.fixture
async def store(test_db):
    return ReservationStore(test_db)


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
async def client(app, store):
    """Create test client with overridden store"""
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def reservation_payload():
    """A valid booking as the website form submits it"""
    return {
        "date": "2099-01-01",
        "time": "19:00",
        "guests": 2,
        "name": "A",
        "email": "a@b.com",
        "phone": "12345",
    }


@pytest.fixture
async def created_reservation(client, reservation_payload):
    response = await client.post("/api/reservations", json=reservation_payload)
    assert response.status_code == 200
    return response.json()["reservation"]
