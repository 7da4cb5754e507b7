"""
login_gateway.credentials.base

The credential store seam.

Responsibilities:
- Define `CredentialRecord` (principal + opaque verifier).
- Define the `CredentialStore` protocol the verifier depends on.
- Define `CredentialStoreError`, the single infrastructure failure type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class CredentialRecord:
    """
    Stored credential for one principal. Never leaves the store/verifier boundary.
    """

    principal: str
    verifier: str = field(repr=False)


class CredentialStoreError(Exception):
    """
    The directory could not be consulted (unreachable, corrupt record, bad response).
    Distinct from "principal not found", which is a normal `None` lookup result.
    """


@runtime_checkable
class CredentialStore(Protocol):
    # Verifier for a secret nobody knows, in this store's format. Compared against
    # when a principal is unknown so both rejection paths cost the same.
    placeholder_verifier: str

    async def lookup(self, principal: str) -> CredentialRecord | None: ...

    async def matches(self, verifier: str, presented_secret: str) -> bool: ...

    async def ping(self) -> None: ...

    async def close(self) -> None: ...


# --- Module Notes -----------------------------------------------------------
# Implementations must be safe for concurrent reads; the API serves requests in
# parallel against a single process-scoped store instance.
