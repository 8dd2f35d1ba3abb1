"""Tests for the sensor owner push token lookup."""
from .helpers import bearer


async def test_lookup_returns_owner_push_token(client, register, add_sensor):
    token = await register(tokenExpo="ExponentPushToken[abc]")
    await add_sensor(token, "S1", "Soil A")
    
    response = await client.post("/token", json={"sensorID": "S1"})
    assert response.status_code == 200
    assert response.json() == {
        "username": "alice",
        "sensorName": "Soil A",
        "expoToken": "ExponentPushToken[abc]",
    }


async def test_lookup_unknown_sensor_is_404(client):
    response = await client.post("/token", json={"sensorID": "NOPE"})
    assert response.status_code == 404
    assert response.json()["message"] == "Sensor no registrado"


async def test_lookup_without_sensor_id_is_400(client):
    response = await client.post("/token", json={})
    assert response.status_code == 400
    assert response.json()["message"] == "Falta sensorID"


async def test_lookup_honours_device_key(client, ctx, register, add_sensor):
    token = await register()
    await add_sensor(token)
    ctx.settings.device_api_key = "device-secret"
    
    response = await client.post("/token", json={"sensorID": "S1"}, headers=bearer(token))
    assert response.status_code == 401
    
    response = await client.post(
        "/token", json={"sensorID": "S1"}, headers={"X-Device-Key": "device-secret"}
    )
    assert response.status_code == 200


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "sqlite"}


async def test_lookup_accepts_numeric_sensor_id(client, register, add_sensor):
    token = await register()
    await add_sensor(token, "101", "Soil A")
    
    response = await client.post("/token", json={"sensorID": 101})
    assert response.status_code == 200
    assert response.json()["sensorName"] == "Soil A"
