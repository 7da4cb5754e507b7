"""
tests.test_entrypoint

Exit-code behavior of `python -m login_gateway.api`.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from login_gateway.api import __main__ as entrypoint
from login_gateway.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    # main() reads through the lru_cache; env changes must be seen on each call.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def no_server(monkeypatch: pytest.MonkeyPatch) -> list[object]:
    started: list[object] = []
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, **kwargs: started.append(app))
    return started


def test_invalid_configuration_exits_2(
    monkeypatch: pytest.MonkeyPatch, no_server: list[object]
) -> None:
    monkeypatch.setenv("LOGIN_REQUEST_TIMEOUT_MS", "0")

    with pytest.raises(SystemExit) as exc_info:
        entrypoint.main()

    assert exc_info.value.code == entrypoint.EXIT_CONFIG_ERROR == 2
    assert no_server == []


def test_unusable_store_url_exits_2(
    monkeypatch: pytest.MonkeyPatch, no_server: list[object]
) -> None:
    monkeypatch.setenv("LOGIN_CREDENTIAL_STORE_URL", "nosuchdialect://x")

    with pytest.raises(SystemExit) as exc_info:
        entrypoint.main()

    assert exc_info.value.code == 2
    assert no_server == []


def test_valid_configuration_starts_server(
    monkeypatch: pytest.MonkeyPatch, no_server: list[object]
) -> None:
    monkeypatch.setenv("LOGIN_CREDENTIAL_STORE_URL", "memory://")
    monkeypatch.setenv("LOGIN_BCRYPT_ROUNDS", "4")

    entrypoint.main()

    assert len(no_server) == 1
