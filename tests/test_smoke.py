"""
tests.test_smoke

Smoke tests to validate the service can boot and serve its probes.

Responsibilities:
- Ensure the FastAPI app starts and the readiness probe reflects store health.
- Ensure startup fails when the credential store is unreachable.
"""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest
from conftest import TEST_ROUNDS, BrokenStore, serve

from login_gateway.api.app import create_app
from login_gateway.credentials.base import CredentialStoreError
from login_gateway.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoints(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

    r = await client.get("/readyz")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_readiness_reports_store_outage(settings: Settings) -> None:
    store = BrokenStore()
    async with serve(create_app(settings=settings, credential_store=store)) as client:
        store.fail_ping = True
        r = await client.get("/readyz")
    assert r.status_code == 503
    assert r.json()["status"] == "unavailable"


@pytest.mark.asyncio
async def test_startup_fails_when_store_unreachable(settings: Settings) -> None:
    app = create_app(settings=settings, credential_store=BrokenStore(fail_ping=True))
    with pytest.raises(CredentialStoreError):
        async with app.router.lifespan_context(app):
            pass


@pytest.mark.asyncio
async def test_sql_store_boots_from_settings(tmp_path: Path) -> None:
    # env=test auto-creates the credentials table, so an empty database is usable.
    settings = Settings(
        env="test",
        credential_store_url=f"sqlite+aiosqlite:///{tmp_path / 'credentials.db'}",
        bcrypt_rounds=TEST_ROUNDS,
    )
    async with serve(create_app(settings=settings)) as client:
        r = await client.get("/readyz")
        assert r.status_code == 200

        r = await client.post("/api/login", json={"username": "alice", "password": "s3cret"})
        assert r.status_code == 401
        assert r.text == "Login failed"


def test_docs_hidden_in_prod() -> None:
    app = create_app(
        settings=Settings(env="prod", credential_store_url="memory://", bcrypt_rounds=TEST_ROUNDS)
    )
    assert app.docs_url is None
    assert app.openapi_url is None
