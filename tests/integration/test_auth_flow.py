"""Integration tests for /auth (needs a migrated PostgreSQL)."""

import uuid

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio(loop_scope="session")


def unique_user() -> dict[str, str]:
    uid = uuid.uuid4().hex[:8]
    return {
        "username": f"testuser_{uid}",
        "email": f"test_{uid}@example.com",
        "password": "TestPass1",
    }


class TestRegister:
    async def test_register_success(self, client: AsyncClient) -> None:
        user = unique_user()
        resp = await client.post("/api/v1/auth/register", json=user)
        assert resp.status_code == 201
        body = resp.json()
        assert body["code"] == 0
        assert body["data"]["username"] == user["username"]
        assert "user_id" in body["data"]

    async def test_register_duplicate_username(self, client: AsyncClient) -> None:
        user = unique_user()
        await client.post("/api/v1/auth/register", json=user)
        resp = await client.post(
            "/api/v1/auth/register", json={**user, "email": f"x{user['email']}"}
        )
        assert resp.status_code == 409
        assert resp.json()["code"] == 1001


class TestLoginAndRefresh:
    async def test_login_then_refresh(self, client: AsyncClient) -> None:
        user = unique_user()
        await client.post("/api/v1/auth/register", json=user)
        login = await client.post("/api/v1/auth/login", json={
            "username": user["username"], "password": user["password"],
        })
        assert login.status_code == 200
        refresh_token = login.json()["data"]["refresh_token"]

        resp = await client.post("/api/v1/auth/refresh", json={"refresh_token": refresh_token})
        assert resp.status_code == 200
        assert resp.json()["data"]["access_token"]

    async def test_wrong_password(self, client: AsyncClient) -> None:
        user = unique_user()
        await client.post("/api/v1/auth/register", json=user)
        resp = await client.post("/api/v1/auth/login", json={
            "username": user["username"], "password": "WrongPass9",
        })
        assert resp.status_code == 401
        assert resp.json()["code"] == 1003
