"""Shared fixtures: an app on a throwaway SQLite file and an in-process client."""
import httpx
import pytest
import pytest_asyncio

from soilwatch.config import Settings
from soilwatch.main import create_app

from .helpers import bearer


@pytest.fixture
def settings(tmp_path):
    return Settings(
        jwt_key="test-secret",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        data_path=str(tmp_path),
        bcrypt_rounds=4,
        alert_threshold=500.0,
        device_api_key=None,
        push_enabled=False,
    )


@pytest_asyncio.fixture
async def app(settings):
    app = create_app(settings)
    await app.state.ctx.db.init()
    yield app
    await app.state.ctx.push_sender.close()
    await app.state.ctx.db.close()


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def ctx(app):
    return app.state.ctx


@pytest.fixture
def register(client):
    """Register a user and return its bearer token."""
    async def _register(username="alice", gmail="a@x.com", password="pw1", tokenExpo=None):
        body = {"username": username, "gmail": gmail, "password": password}
        if tokenExpo is not None:
            body["tokenExpo"] = tokenExpo
        response = await client.post("/user", json=body)
        assert response.status_code == 200, response.text
        return response.json()["token"]
    return _register


@pytest.fixture
def add_sensor(client):
    """Register a sensor for the owner of `token` and return its record."""
    async def _add_sensor(token, sensor_id="S1", name="Soil A", description="desc"):
        response = await client.post(
            "/sensor",
            json={"sensorID": sensor_id, "sensorUsername": name, "sensorDescripction": description},
            headers=bearer(token),
        )
        assert response.status_code == 200, response.text
        return response.json()["sensor"]
    return _add_sensor
