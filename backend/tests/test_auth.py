"""Tests for the bearer token gate."""
from datetime import timedelta

import pytest

from soilwatch.dependencies import extract_bearer_token

from .helpers import bearer


@pytest.mark.parametrize("header,expected", [
    ("Bearer abc.def.ghi", "abc.def.ghi"),
    (None, None),
    ("", None),
    ("Bearer ", None),
    ("Token abc", None),
    ("bearer abc", None),
    ("abc", None),
])
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected


async def test_missing_token_is_401(client):
    response = await client.get("/user")
    assert response.status_code == 401
    assert response.json() == {"message": "Token requerido", "token": None}


async def test_wrong_scheme_is_401(client, register):
    token = await register()
    response = await client.get("/user", headers={"Authorization": f"Token {token}"})
    assert response.status_code == 401


async def test_invalid_token_is_403(client):
    response = await client.get("/sensor", headers=bearer("not.a.token"))
    assert response.status_code == 403
    assert response.json() == {"message": "Token inválido", "token": None}


async def test_expired_token_is_403(client, ctx, register):
    await register()
    expired = ctx.tokens.issue(
        {"id": 1, "username": "alice", "gmail": "a@x.com", "tokenExpo": None},
        ttl=timedelta(seconds=-1),
    )
    response = await client.get("/user", headers=bearer(expired))
    assert response.status_code == 403


async def test_token_without_user_id_is_403(client, ctx):
    token = ctx.tokens.issue({"username": "alice"})
    response = await client.get("/reports", headers=bearer(token))
    assert response.status_code == 403


async def test_gate_passes_issued_claims_through(client, ctx, register):
    token = await register(tokenExpo="ExponentPushToken[abc]")
    claims = ctx.tokens.verify(token)
    assert claims == {
        "id": claims["id"],
        "username": "alice",
        "gmail": "a@x.com",
        "tokenExpo": "ExponentPushToken[abc]",
    }
    
    response = await client.get("/user", headers=bearer(token))
    assert response.status_code == 200
    assert response.json()["usuario"]["id"] == claims["id"]
