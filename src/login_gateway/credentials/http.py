"""
login_gateway.credentials.http

HTTP client boundary for a remote user directory.

Responsibilities:
- Fetch a principal's verifier from `GET {base}/principals/{principal}`.
- Map 404 to "not found" and every other failure to `CredentialStoreError`.
- Provide a stable interface that can later be swapped to LDAP/SCIM clients.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from login_gateway.credentials.base import CredentialRecord, CredentialStoreError
from login_gateway.credentials.hashing import check_secret_async, make_placeholder_verifier

_DOT_SEGMENTS = frozenset({".", ".."})


class HttpCredentialStore:
    """
    The directory returns `{"principal": str, "verifier": str}` for known principals.
    Comparison happens locally; the presented secret never leaves this process.
    """

    def __init__(self, *, http: httpx.AsyncClient, rounds: int = 12) -> None:
        self._http = http
        self.placeholder_verifier = make_placeholder_verifier(rounds=rounds)

    @classmethod
    def from_url(cls, base_url: str, *, rounds: int = 12) -> HttpCredentialStore:
        # No client-side timeout: the verifier enforces the request deadline.
        return cls(http=httpx.AsyncClient(base_url=base_url, timeout=None), rounds=rounds)

    async def lookup(self, principal: str) -> CredentialRecord | None:
        if principal in _DOT_SEGMENTS:
            # Would be collapsed by URL resolution into a request for the parent path.
            return None
        try:
            r = await self._http.get(f"/principals/{quote(principal, safe='')}")
        except httpx.HTTPError as e:
            raise CredentialStoreError(f"directory unreachable: {e.__class__.__name__}") from e

        if r.status_code == httpx.codes.NOT_FOUND:
            return None
        if r.status_code != httpx.codes.OK:
            raise CredentialStoreError(f"directory returned HTTP {r.status_code}")

        return _parse_record(principal, r)

    async def matches(self, verifier: str, presented_secret: str) -> bool:
        return await check_secret_async(presented_secret, verifier)

    async def ping(self) -> None:
        try:
            r = await self._http.get("/healthz")
            r.raise_for_status()
        except httpx.HTTPError as e:
            raise CredentialStoreError(f"directory ping failed: {e.__class__.__name__}") from e

    async def close(self) -> None:
        await self._http.aclose()


def _parse_record(principal: str, r: httpx.Response) -> CredentialRecord:
    try:
        payload: Any = r.json()
    except ValueError as e:
        raise CredentialStoreError("directory returned a non-JSON body") from e

    verifier = payload.get("verifier") if isinstance(payload, dict) else None
    if not isinstance(verifier, str) or not verifier:
        raise CredentialStoreError("directory record has no verifier")
    # Guard against a directory answering for a different (or unnamed) principal.
    if payload.get("principal") != principal:
        raise CredentialStoreError("directory record principal mismatch")
    return CredentialRecord(principal=principal, verifier=verifier)


# --- Module Notes -----------------------------------------------------------
# mTLS / service-to-service auth towards the directory would be configured on the
# injected `httpx.AsyncClient`.
