"""
tests.conftest

Shared fixtures and store doubles.

Responsibilities:
- Provide test settings and a seeded in-memory credential store (`alice` / `s3cret`).
- Provide an httpx client bound to the app over ASGITransport with lifespan managed explicitly.
- Provide store doubles for latency, hangs and failures.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from login_gateway.api.app import create_app
from login_gateway.credentials.base import CredentialRecord, CredentialStoreError
from login_gateway.credentials.memory import InMemoryCredentialStore
from login_gateway.settings import Settings

# Minimum bcrypt work factor keeps the suite fast.
TEST_ROUNDS = 4


class SpyStore(InMemoryCredentialStore):
    """In-memory store that records every call the verifier makes."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.lookups: list[str] = []
        self.compared: list[str] = []

    async def lookup(self, principal: str) -> CredentialRecord | None:
        self.lookups.append(principal)
        return await super().lookup(principal)

    async def matches(self, verifier: str, presented_secret: str) -> bool:
        self.compared.append(verifier)
        return await super().matches(verifier, presented_secret)


class FixedLatencyStore:
    """
    Store with deterministic costs: lookup and comparison each take a fixed time.
    Verifiers are `v:<secret>` so no hashing noise enters timing measurements.
    """

    placeholder_verifier = "v:placeholder-nobody-knows"

    def __init__(self, records: dict[str, str], *, lookup_s: float, compare_s: float) -> None:
        self._records = records
        self._lookup_s = lookup_s
        self._compare_s = compare_s

    async def lookup(self, principal: str) -> CredentialRecord | None:
        await asyncio.sleep(self._lookup_s)
        secret = self._records.get(principal)
        if secret is None:
            return None
        return CredentialRecord(principal=principal, verifier=f"v:{secret}")

    async def matches(self, verifier: str, presented_secret: str) -> bool:
        await asyncio.sleep(self._compare_s)
        return verifier == f"v:{presented_secret}"

    async def ping(self) -> None:
        return None

    async def close(self) -> None:
        return None


class HangingStore(FixedLatencyStore):
    """Lookup blocks far beyond any test deadline."""

    def __init__(self) -> None:
        super().__init__({}, lookup_s=30.0, compare_s=0.0)
        self.cancelled = False

    async def lookup(self, principal: str) -> CredentialRecord | None:
        try:
            return await super().lookup(principal)
        except asyncio.CancelledError:
            self.cancelled = True
            raise


class BrokenStore(FixedLatencyStore):
    """Directory unreachable: every operation raises `CredentialStoreError`."""

    def __init__(self, *, fail_ping: bool = False) -> None:
        super().__init__({}, lookup_s=0.0, compare_s=0.0)
        self.fail_ping = fail_ping

    async def lookup(self, principal: str) -> CredentialRecord | None:
        raise CredentialStoreError("connection refused")

    async def ping(self) -> None:
        if self.fail_ping:
            raise CredentialStoreError("connection refused")


class ExplodingStore(FixedLatencyStore):
    """A bug inside the adapter (not an infrastructure error)."""

    def __init__(self) -> None:
        super().__init__({}, lookup_s=0.0, compare_s=0.0)

    async def lookup(self, principal: str) -> CredentialRecord | None:
        raise RuntimeError("adapter bug")


@asynccontextmanager
async def serve(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    # httpx ASGITransport does not manage lifespan automatically; do it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        credential_store_url="memory://",
        bcrypt_rounds=TEST_ROUNDS,
    )


@pytest.fixture
def store() -> SpyStore:
    s = SpyStore(rounds=TEST_ROUNDS)
    s.add("alice", "s3cret")
    return s


@pytest_asyncio.fixture
async def client(settings: Settings, store: SpyStore) -> AsyncIterator[httpx.AsyncClient]:
    async with serve(create_app(settings=settings, credential_store=store)) as c:
        yield c
