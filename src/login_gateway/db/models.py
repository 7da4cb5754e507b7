"""
login_gateway.db.models

Persistence schema for the credential directory.

Responsibilities:
- Define the `Credential` ORM model (one bcrypt verifier per principal).
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from login_gateway.db.base import Base


def _utcnow() -> datetime:
    # Persist naive UTC timestamps for simplicity; production systems may use tz-aware types.
    return datetime.utcnow()


class Credential(Base):
    __tablename__ = "credentials"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    principal: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    verifier: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(default=_utcnow)

    def __repr__(self) -> str:
        # Verifier deliberately omitted.
        return f"Credential(id={self.id!r}, principal={self.principal!r})"


# --- Module Notes -----------------------------------------------------------
# The table is owned by whoever provisions accounts; this service only reads it.
