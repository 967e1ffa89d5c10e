"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from learn2earn.auth.service import register_user
from learn2earn.config import get_settings
from learn2earn.database import Store
from learn2earn.main import create_app, open_store


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "db.json"


@pytest.fixture
def store(data_file: Path) -> Store:
    """A seeded store bound to a temporary data file."""
    return open_store(str(data_file))


@pytest.fixture
def alice(store: Store) -> dict:
    """A registered user, created directly through the service layer."""
    user, token = register_user(store, "alice@example.com", "pw123", "Alice")
    return {"email": user.email, "password": "pw123", "token": token, "wallet_address": user.wallet_address}


@pytest.fixture
def bob(store: Store) -> dict:
    user, token = register_user(store, "bob@example.com", "hunter2")
    return {"email": user.email, "password": "hunter2", "token": token, "wallet_address": user.wallet_address}


@pytest_asyncio.fixture
async def client(store: Store, data_file: Path, monkeypatch) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client over the app, with the test store installed.

    ASGITransport does not run the lifespan, so the store is attached directly.
    """
    monkeypatch.setenv("L2E_DATA_FILE", str(data_file))
    monkeypatch.setenv("L2E_RATE_LIMIT_WINDOW_SECONDS", "3600")
    get_settings.cache_clear()

    app = create_app()
    app.state.store = store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    get_settings.cache_clear()


async def _register(client: AsyncClient, email: str, password: str, **extra) -> dict:
    """Helper to register a user over HTTP."""
    response = await client.post("/api/register", json={"email": email, "password": password, **extra})
    assert response.status_code == 200, response.text
    data = response.json()
    return {"email": email, "password": password, **data}


@pytest_asyncio.fixture
async def registered_user(client: AsyncClient) -> dict:
    """Register a@b.com over HTTP. Returns credentials and the issued token."""
    return await _register(client, "a@b.com", "pw123")


@pytest_asyncio.fixture
async def authed_client(client: AsyncClient, registered_user: dict) -> AsyncClient:
    """Client carrying a valid bearer token."""
    client.headers["Authorization"] = f"Bearer {registered_user['token']}"
    return client
