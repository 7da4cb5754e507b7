"""
login_gateway.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide the credential store URL from repr/logging (it may embed credentials).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    - Strict env-driven configuration (prefix `LOGIN_`)
    - Defaults safe for local dev
    - Single settings object injected across layers
    """

    model_config = SettingsConfigDict(env_prefix="LOGIN_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "login-gateway"
    log_level: str = "INFO"

    listen_address: str = "0.0.0.0:8080"

    # Deadline for a whole verification (lookup + comparison).
    request_timeout_ms: int = Field(default=5000, ge=1)

    # Opaque to the core; the scheme selects the store implementation.
    credential_store_url: str = Field(
        default="sqlite+aiosqlite:///./credentials.db",
        repr=False,
    )

    # Work factor used when this service produces verifiers (placeholder, in-memory seeding).
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    @field_validator("listen_address")
    @classmethod
    def _check_listen_address(cls, value: str) -> str:
        split_listen_address(value)
        return value

    @property
    def host(self) -> str:
        return split_listen_address(self.listen_address)[0]

    @property
    def port(self) -> int:
        return split_listen_address(self.listen_address)[1]

    @property
    def request_timeout(self) -> float:
        return self.request_timeout_ms / 1000


def split_listen_address(value: str) -> tuple[str, int]:
    """
    Parse `host:port`. IPv6 hosts use brackets (`[::1]:8080`).
    """

    host, sep, port_raw = value.rpartition(":")
    if not sep or not host or not port_raw.isdigit():
        raise ValueError(f"listen address must be host:port, got {value!r}")
    port = int(port_raw)
    if not 0 < port < 65536:
        raise ValueError(f"port out of range: {port}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Every other module depends on this one; keep field names stable since they are
# the operator-facing env var contract (LOGIN_LISTEN_ADDRESS, LOGIN_REQUEST_TIMEOUT_MS, ...).
