"""
login_gateway.credentials.hashing

bcrypt helpers shared by the store implementations.

Responsibilities:
- Produce bcrypt verifiers for seeding and for the placeholder verifier.
- Compare a presented secret against a verifier in constant time, off the event loop.
"""

from __future__ import annotations

import asyncio
import secrets

import bcrypt

from login_gateway.credentials.base import CredentialStoreError

# bcrypt only considers the first 72 bytes; newer releases raise instead of truncating.
_BCRYPT_MAX_BYTES = 72


def _secret_bytes(secret: str) -> bytes:
    return secret.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_secret(secret: str, *, rounds: int = 12) -> str:
    return bcrypt.hashpw(_secret_bytes(secret), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def make_placeholder_verifier(*, rounds: int = 12) -> str:
    """
    Verifier for a random secret that is discarded immediately.
    Uses the same work factor as real records so comparisons cost the same.
    """

    return hash_secret(secrets.token_urlsafe(32), rounds=rounds)


def check_secret(secret: str, verifier: str) -> bool:
    try:
        return bcrypt.checkpw(_secret_bytes(secret), verifier.encode("utf-8"))
    except ValueError as e:
        # Malformed hash in the directory: an infrastructure problem, not a rejection.
        raise CredentialStoreError("stored verifier is not a valid bcrypt hash") from e


async def check_secret_async(secret: str, verifier: str) -> bool:
    # bcrypt is CPU-bound; run it in a worker thread so the event loop keeps serving.
    return await asyncio.to_thread(check_secret, secret, verifier)
