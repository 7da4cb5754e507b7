"""
login_gateway.api.__main__

Entrypoint for running the service via `python -m login_gateway.api` (or `login-gateway`).

Responsibilities:
- Load settings and build the credential store, exiting with status 2 on failure.
- Create the app.
- Start uvicorn with structlog-compatible logging config.

Exit codes: 0 on normal shutdown, 2 on bad configuration or store construction
failure; uvicorn exits non-zero itself on bind failure or a failed startup ping.
"""

from __future__ import annotations

import uvicorn
from pydantic import ValidationError

from login_gateway.api.app import create_app
from login_gateway.credentials.base import CredentialStoreError
from login_gateway.credentials.factory import build_credential_store
from login_gateway.observability.logging import configure_logging, get_logger
from login_gateway.settings import get_settings

EXIT_CONFIG_ERROR = 2

log = get_logger(__name__)


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        # include_input=False: values may contain the store URL and its password.
        log.error("invalid_configuration", errors=e.errors(include_url=False, include_input=False))
        raise SystemExit(EXIT_CONFIG_ERROR) from e

    configure_logging(service_name=settings.service_name, level=settings.log_level)
    try:
        store = build_credential_store(settings)
    except CredentialStoreError as e:
        log.error("credential_store_init_failed", detail=str(e))
        raise SystemExit(EXIT_CONFIG_ERROR) from e

    app = create_app(settings=settings, credential_store=store)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# TLS termination and rate limiting are expected in front of this process
# (ingress/load balancer); neither is handled here.
