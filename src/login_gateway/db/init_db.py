"""
login_gateway.db.init_db

DB initialization helpers (dev/test convenience).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from login_gateway.db import models  # noqa: F401  (registers tables on Base.metadata)
from login_gateway.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    In production the directory owner manages the schema.
    """

    # Use a transactional DDL block when supported by the backend.
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
