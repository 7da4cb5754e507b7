"""
login_gateway.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with credential store connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from login_gateway.api.deps import credential_store_from_app
from login_gateway.credentials.base import CredentialStore, CredentialStoreError
from login_gateway.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness: process is up and serving HTTP.
    return {"status": "ok"}


@router.get("/readyz", response_model=None)
async def readyz(
    store: CredentialStore = Depends(credential_store_from_app),
) -> dict[str, str] | JSONResponse:
    # Readiness: verify the credential store is reachable.
    try:
        await store.ping()
    except CredentialStoreError as e:
        log.warning("readiness_failed", detail=str(e))
        return JSONResponse({"status": "unavailable"}, status_code=HTTP_503_SERVICE_UNAVAILABLE)
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# Kubernetes typically uses /healthz for liveness and /readyz for readiness gating.
