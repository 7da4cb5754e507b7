"""
login_gateway.auth.verifier

Credential verification against a `CredentialStore`.

Responsibilities:
- Decide Authenticated / Rejected for a (principal, secret) pair.
- Equalize the cost of "unknown principal" and "bad secret" rejections.
- Enforce the verification deadline and convert store failures into explicit outcomes.
"""

from __future__ import annotations

import asyncio

from login_gateway.auth.models import (
    Authenticated,
    ErrorKind,
    Rejected,
    RejectReason,
    VerificationError,
    VerificationOutcome,
)
from login_gateway.credentials.base import CredentialStore, CredentialStoreError
from login_gateway.observability.logging import get_logger

log = get_logger(__name__)


class Verifier:
    """
    Stateless apart from the injected store; one instance serves all requests.

    `verify` never raises for store problems. Only cancellation propagates, and since
    nothing is written there is no partial state to clean up.
    """

    def __init__(self, *, store: CredentialStore, timeout: float = 5.0) -> None:
        self._store = store
        self._timeout = timeout

    async def verify(self, principal: str, secret: str) -> VerificationOutcome:
        try:
            async with asyncio.timeout(self._timeout):
                outcome = await self._check(principal, secret)
        except TimeoutError:
            log.warning("verification_error", principal=principal, kind=ErrorKind.store_timeout)
            return VerificationError(kind=ErrorKind.store_timeout)
        except CredentialStoreError as e:
            log.warning(
                "verification_error",
                principal=principal,
                kind=ErrorKind.store_unavailable,
                detail=str(e),
            )
            return VerificationError(kind=ErrorKind.store_unavailable)
        except Exception:
            log.exception("verification_error", principal=principal, kind=ErrorKind.internal)
            return VerificationError(kind=ErrorKind.internal)

        if isinstance(outcome, Authenticated):
            log.info("verification_succeeded", principal=principal)
        else:
            log.info("verification_rejected", principal=principal, reason=outcome.reason)
        return outcome

    async def _check(self, principal: str, secret: str) -> Authenticated | Rejected:
        record = await self._store.lookup(principal)

        if record is None:
            # Burn one comparison anyway so response time does not reveal which
            # principals exist.
            await self._store.matches(self._store.placeholder_verifier, secret)
            return Rejected(principal=principal, reason=RejectReason.unknown_principal)

        if await self._store.matches(record.verifier, secret):
            return Authenticated(principal=record.principal)
        return Rejected(principal=principal, reason=RejectReason.bad_secret)


# --- Module Notes -----------------------------------------------------------
# No retries: a failed lookup is reported once and mapped to 5xx by the API layer.
