"""
login_gateway.credentials.sql

SQL-backed credential store (SQLAlchemy async).

Responsibilities:
- Look up a principal's verifier in the `credentials` table.
- Translate driver/connection failures into `CredentialStoreError`.
- Own the engine lifecycle (create on construction, dispose on close).
"""

from __future__ import annotations

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError

from login_gateway.credentials.base import CredentialRecord, CredentialStoreError
from login_gateway.credentials.hashing import check_secret_async, make_placeholder_verifier
from login_gateway.db.init_db import init_db
from login_gateway.db.models import Credential
from login_gateway.db.session import create_engine, create_sessionmaker


class SqlCredentialStore:
    def __init__(self, database_url: str, *, rounds: int = 12) -> None:
        self._engine = create_engine(database_url)
        self._sessionmaker = create_sessionmaker(self._engine)
        self.placeholder_verifier = make_placeholder_verifier(rounds=rounds)

    async def init_schema(self) -> None:
        try:
            await init_db(self._engine)
        except (SQLAlchemyError, OSError) as e:
            raise CredentialStoreError(f"schema bootstrap failed: {e.__class__.__name__}") from e

    async def lookup(self, principal: str) -> CredentialRecord | None:
        stmt = select(Credential.verifier).where(Credential.principal == principal)
        try:
            async with self._sessionmaker() as session:
                verifier = (await session.execute(stmt)).scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            # Exception text can carry connection strings; keep only the type.
            raise CredentialStoreError(f"lookup failed: {e.__class__.__name__}") from e
        if verifier is None:
            return None
        return CredentialRecord(principal=principal, verifier=verifier)

    async def matches(self, verifier: str, presented_secret: str) -> bool:
        return await check_secret_async(presented_secret, verifier)

    async def ping(self) -> None:
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            raise CredentialStoreError(f"ping failed: {e.__class__.__name__}") from e

    async def close(self) -> None:
        # Dispose the engine to close pools/FDs gracefully.
        await self._engine.dispose()


# --- Module Notes -----------------------------------------------------------
# Any async SQLAlchemy URL works (sqlite+aiosqlite, postgresql+asyncpg, ...); only the
# aiosqlite driver is a declared dependency.
