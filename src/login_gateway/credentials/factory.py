"""
login_gateway.credentials.factory

Build the process-scoped credential store from settings.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from sqlalchemy.exc import SQLAlchemyError

from login_gateway.credentials.base import CredentialStore, CredentialStoreError
from login_gateway.credentials.http import HttpCredentialStore
from login_gateway.credentials.memory import InMemoryCredentialStore
from login_gateway.credentials.sql import SqlCredentialStore
from login_gateway.settings import Settings


def build_credential_store(settings: Settings) -> CredentialStore:
    """
    Scheme selects the implementation:
    - `memory://`        empty in-memory store (local experiments)
    - `http(s)://...`    remote directory over HTTP
    - anything else      async SQLAlchemy URL
    """

    url = settings.credential_store_url
    scheme = urlsplit(url).scheme.lower()
    rounds = settings.bcrypt_rounds

    if scheme == "memory":
        return InMemoryCredentialStore(rounds=rounds)
    if scheme in ("http", "https"):
        return HttpCredentialStore.from_url(url, rounds=rounds)
    if not scheme:
        raise CredentialStoreError("credential store URL has no scheme")

    try:
        return SqlCredentialStore(url, rounds=rounds)
    except (SQLAlchemyError, ImportError, ValueError) as e:
        # Unknown dialect/driver or malformed URL; hide the URL itself (may embed a password).
        raise CredentialStoreError(f"unsupported credential store URL ({e.__class__.__name__})") from e
