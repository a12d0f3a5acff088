"""Integration-test fixtures.

Requires a migrated PostgreSQL reachable at DATABASE_URL:

    alembic upgrade head
    RUN_INTEGRATION=1 pytest tests/integration -v

Without RUN_INTEGRATION=1 every test in this directory is skipped.
All integration tests share one event loop so the module-level async engine
pool stays valid for the whole session.
"""

import os
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import app

_PASSWORD = "TestPass123"


def pytest_collection_modifyitems(config, items) -> None:
    if os.environ.get("RUN_INTEGRATION") == "1":
        return
    skip = pytest.mark.skip(reason="set RUN_INTEGRATION=1 with a migrated database")
    for item in items:
        if "tests/integration" in item.nodeid.replace("\\", "/"):
            item.add_marker(pytest.mark.integration)
            item.add_marker(skip)


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def client() -> AsyncClient:  # type: ignore[override]
    """Session-scoped async HTTP client — keeps the engine pool alive."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _register_and_login(client: AsyncClient, prefix: str) -> dict[str, str]:
    uid = uuid.uuid4().hex[:8]
    username = f"{prefix}_{uid}"
    await client.post("/api/v1/auth/register", json={
        "username": username,
        "email": f"{username}@example.com",
        "password": _PASSWORD,
    })
    login = await client.post("/api/v1/auth/login", json={
        "username": username,
        "password": _PASSWORD,
    })
    data = login.json()["data"]
    return {
        "user_id": data["user"]["user_id"],
        "Authorization": f"Bearer {data['access_token']}",
    }


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def seller(client: AsyncClient) -> dict[str, str]:
    """{'user_id': ..., 'Authorization': 'Bearer ...'} for a fresh seller."""
    return await _register_and_login(client, "seller")


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def buyer(client: AsyncClient) -> dict[str, str]:
    return await _register_and_login(client, "buyer")
