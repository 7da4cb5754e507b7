"""
login_gateway.credentials.memory

In-memory credential store (tests and local development).
"""

from __future__ import annotations

from login_gateway.credentials.base import CredentialRecord
from login_gateway.credentials.hashing import (
    check_secret_async,
    hash_secret,
    make_placeholder_verifier,
)


class InMemoryCredentialStore:
    """
    principal -> bcrypt verifier map.

    Seeding (`add`) is expected to happen before the store is shared; afterwards
    it is only read, so concurrent requests need no locking.
    """

    def __init__(
        self,
        verifiers: dict[str, str] | None = None,
        *,
        rounds: int = 12,
    ) -> None:
        self._rounds = rounds
        self._verifiers: dict[str, str] = dict(verifiers or {})
        self.placeholder_verifier = make_placeholder_verifier(rounds=rounds)

    def add(self, principal: str, secret: str) -> None:
        self._verifiers[principal] = hash_secret(secret, rounds=self._rounds)

    async def lookup(self, principal: str) -> CredentialRecord | None:
        verifier = self._verifiers.get(principal)
        if verifier is None:
            return None
        return CredentialRecord(principal=principal, verifier=verifier)

    async def matches(self, verifier: str, presented_secret: str) -> bool:
        return await check_secret_async(presented_secret, verifier)

    async def ping(self) -> None:
        return None

    async def close(self) -> None:
        return None
