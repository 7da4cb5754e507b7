"""
login_gateway.auth.models

Verification outcome types.

Responsibilities:
- `Authenticated` / `Rejected` verdicts.
- `VerificationError` for infrastructure failures, kept apart from rejections.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class RejectReason(enum.StrEnum):
    unknown_principal = "unknown-principal"
    bad_secret = "bad-secret"


class ErrorKind(enum.StrEnum):
    store_timeout = "store-timeout"
    store_unavailable = "store-unavailable"
    internal = "internal"


@dataclass(frozen=True, slots=True)
class Authenticated:
    principal: str


@dataclass(frozen=True, slots=True)
class Rejected:
    """
    The reason is for logs only; callers facing clients must collapse it.
    """

    principal: str
    reason: RejectReason


@dataclass(frozen=True, slots=True)
class VerificationError:
    kind: ErrorKind


AuthVerdict = Authenticated | Rejected
VerificationOutcome = Authenticated | Rejected | VerificationError


# --- Module Notes -----------------------------------------------------------
# These are returned, never raised: the verifier converts store exceptions into
# `VerificationError` so the API can tell 401 from 5xx without try/except.
