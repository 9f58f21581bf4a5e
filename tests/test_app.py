"""Tests for application wiring: health, lifespan, static site, errors"""

import pytest
from httpx import ASGITransport, AsyncClient

from modern_restaurant.api.reservations import get_store
from modern_restaurant.config import Settings
from modern_restaurant.database import Database
from modern_restaurant.main import create_app
from modern_restaurant.store import ReservationStore


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_ready(client: AsyncClient):
    response = await client.get("/api/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready", "checks": {"database": "ok"}}


@pytest.mark.asyncio
async def test_not_ready_when_database_unreachable(app, tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/reservations.db")
    app.dependency_overrides[get_store] = lambda: ReservationStore(database)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/api/health/ready")

    await database.dispose()

    assert response.status_code == 503
    assert response.json() == {"status": "not_ready", "checks": {"database": "failed"}}


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient):
    response = await client.get("/api/menu")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


@pytest.mark.asyncio
async def test_lifespan_builds_store(test_settings):
    app = create_app(test_settings)

    async with app.router.lifespan_context(app):
        assert isinstance(app.state.store, ReservationStore)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.post(
                "/api/reservations",
                json={
                    "date": "2099-01-01",
                    "time": "19:00",
                    "guests": 2,
                    "name": "A",
                    "email": "a@b.com",
                    "phone": "12345",
                },
            )
            listed = await client.get("/api/reservations")

    assert response.status_code == 200
    assert response.json()["reservationId"] == 1
    assert len(listed.json()["reservations"]) == 1


@pytest.mark.asyncio
async def test_serves_website(tmp_path, store):
    (tmp_path / "index.html").write_text("<h1>Modern Restaurant</h1>")
    app = create_app(
        Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:", static_dir=str(tmp_path))
    )
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        page = await client.get("/")
        api = await client.get("/api/reservations")

    assert page.status_code == 200
    assert "Modern Restaurant" in page.text
    assert api.json() == {"success": True, "reservations": []}


def test_cors_origins_list():
    settings = Settings(_env_file=None, cors_origins="http://localhost:3000, https://example.com,")

    assert settings.cors_origins_list == ["http://localhost:3000", "https://example.com"]


def test_default_settings():
    settings = Settings(_env_file=None)

    assert settings.database_url.startswith("sqlite+aiosqlite")
    assert settings.api_port == 3000
    assert settings.cors_origins_list == ["*"]
    assert settings.static_dir is None
