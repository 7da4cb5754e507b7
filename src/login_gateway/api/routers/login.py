"""
login_gateway.api.routers.login

The login endpoint.

Responsibilities:
- Validate the JSON body shape (400 on anything malformed; verifier not called).
- Delegate to the `Verifier` and map its outcome to status code + plain-text body.
- Abandon verification when the client disconnects.

Rejection reasons are collapsed into a single 401 so responses never reveal which
principals exist.
"""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from login_gateway.api.deps import verifier_from_app
from login_gateway.auth.models import (
    Authenticated,
    ErrorKind,
    Rejected,
    VerificationError,
    VerificationOutcome,
)
from login_gateway.auth.verifier import Verifier
from login_gateway.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(tags=["auth"])

LOGIN_SUCCESSFUL = "Login successful"
LOGIN_FAILED = "Login failed"
INVALID_REQUEST = "Invalid request"
INTERNAL_ERROR = "Internal error"
GATEWAY_TIMEOUT = "Gateway timeout"

# nginx convention for "client closed request"; never actually delivered.
CLIENT_CLOSED_REQUEST = 499

_ERROR_RESPONSES: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.store_timeout: (504, GATEWAY_TIMEOUT),
    ErrorKind.store_unavailable: (500, INTERNAL_ERROR),
    ErrorKind.internal: (500, INTERNAL_ERROR),
}


class LoginRequest(BaseModel):
    # strict: numbers/bools/nulls are not coerced into strings.
    model_config = ConfigDict(strict=True)

    username: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)


def text_response(status_code: int, body: str) -> PlainTextResponse:
    # Credential responses must not be cached by browsers or proxies.
    return PlainTextResponse(body, status_code=status_code, headers={"Cache-Control": "no-store"})


def outcome_response(outcome: VerificationOutcome) -> PlainTextResponse:
    if isinstance(outcome, Authenticated):
        return text_response(200, LOGIN_SUCCESSFUL)
    if isinstance(outcome, Rejected):
        return text_response(401, LOGIN_FAILED)
    status_code, body = _ERROR_RESPONSES[outcome.kind]
    return text_response(status_code, body)


@router.post(
    "/api/login",
    response_class=PlainTextResponse,
    responses={
        200: {"description": LOGIN_SUCCESSFUL},
        400: {"description": INVALID_REQUEST},
        401: {"description": LOGIN_FAILED},
        500: {"description": INTERNAL_ERROR},
        504: {"description": GATEWAY_TIMEOUT},
    },
)
async def login(
    request: Request,
    verifier: Verifier = Depends(verifier_from_app),
) -> PlainTextResponse:
    # Parsed by hand so malformed bodies get the plain-text 400 instead of FastAPI's 422.
    raw = await request.body()
    try:
        body = LoginRequest.model_validate_json(raw)
    except ValidationError as e:
        # Field locations only: `input` would echo the submitted password.
        log.info("login_invalid_request", errors=[err["loc"] for err in e.errors()])
        return text_response(400, INVALID_REQUEST)

    outcome = await _verify_unless_disconnected(request, verifier, body)
    if outcome is None:
        return text_response(CLIENT_CLOSED_REQUEST, "")

    if isinstance(outcome, VerificationError):
        log.warning("login_error", principal=body.username, kind=outcome.kind)
    else:
        log.info(
            "login_completed",
            principal=body.username,
            authenticated=isinstance(outcome, Authenticated),
        )
    return outcome_response(outcome)


async def _verify_unless_disconnected(
    request: Request,
    verifier: Verifier,
    body: LoginRequest,
) -> VerificationOutcome | None:
    """
    Run verification while watching the connection. Returns None when the client
    went away first; the verification task is cancelled and awaited in that case.
    """

    verify_task = asyncio.create_task(verifier.verify(body.username, body.password))
    disconnect_task = asyncio.create_task(_wait_for_disconnect(request))
    try:
        await asyncio.wait({verify_task, disconnect_task}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        disconnect_task.cancel()
        if not verify_task.done():
            verify_task.cancel()

    if verify_task.cancelled() or not verify_task.done():
        await asyncio.wait({verify_task})
        log.info("login_abandoned", principal=body.username)
        return None
    return verify_task.result()


async def _wait_for_disconnect(request: Request) -> None:
    # The body has been consumed, so the next ASGI message is the disconnect.
    while True:
        message = await request.receive()
        if message["type"] == "http.disconnect":
            return


# --- Module Notes -----------------------------------------------------------
# The password is only ever passed to the verifier; it is excluded from repr and
# from every log call in this module.
