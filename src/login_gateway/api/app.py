"""
login_gateway.api.app

FastAPI app factory for the login gateway.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Own the credential store lifecycle (schema bootstrap, startup ping, close).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from login_gateway import __version__
from login_gateway.api.routers.health import router as health_router
from login_gateway.api.routers.login import INTERNAL_ERROR, text_response
from login_gateway.api.routers.login import router as login_router
from login_gateway.auth.verifier import Verifier
from login_gateway.credentials.base import CredentialStore
from login_gateway.credentials.factory import build_credential_store
from login_gateway.credentials.sql import SqlCredentialStore
from login_gateway.observability.logging import configure_logging, get_logger
from login_gateway.observability.middleware import REQUEST_ID_HEADER, RequestContextMiddleware
from login_gateway.settings import Settings

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    credential_store: CredentialStore | None = None,
) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    # Tests inject a store; otherwise the URL scheme decides.
    store = credential_store if credential_store is not None else build_credential_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, store=type(store).__name__)
        if isinstance(store, SqlCredentialStore) and settings.env in ("dev", "test"):
            # Dev/test convenience: create tables automatically. Prod schema belongs to the directory owner.
            await store.init_schema()
        # Fail startup (non-zero exit under uvicorn) when the store is unreachable.
        await store.ping()

        app.state.credential_store = store
        app.state.verifier = Verifier(store=store, timeout=settings.request_timeout)
        try:
            yield
        finally:
            await store.close()
            log.info("shutdown")

    app = FastAPI(
        title="Login Gateway",
        version=__version__,
        docs_url="/docs" if settings.env != "prod" else None,
        openapi_url="/openapi.json" if settings.env != "prod" else None,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(login_router)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> PlainTextResponse:
        log.error("unhandled_error", exc_info=exc)
        response = text_response(500, INTERNAL_ERROR)
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response

    return app


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; verification logic
# stays in `auth.verifier`, status code mapping in `api.routers.login`.
