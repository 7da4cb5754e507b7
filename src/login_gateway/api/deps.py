"""
login_gateway.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Encapsulate app.state access patterns (credential store, verifier).
"""

from __future__ import annotations

from fastapi import Request

from login_gateway.auth.verifier import Verifier
from login_gateway.credentials.base import CredentialStore


def verifier_from_app(request: Request) -> Verifier:
    # Created on app startup in `login_gateway.api.app.create_app`.
    return request.app.state.verifier  # type: ignore[attr-defined]


def credential_store_from_app(request: Request) -> CredentialStore:
    return request.app.state.credential_store  # type: ignore[attr-defined]
