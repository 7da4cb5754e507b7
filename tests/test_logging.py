from __future__ import annotations

from login_gateway.observability.logging import REDACTED, redact_secrets


def test_sensitive_keys_are_redacted() -> None:
    event = redact_secrets(
        None,
        "info",
        {"event": "login", "principal": "alice", "password": "s3cret", "verifier": "$2b$..."},
    )
    assert event["password"] == REDACTED
    assert event["verifier"] == REDACTED
    assert event["principal"] == "alice"


def test_events_without_secrets_untouched() -> None:
    event = {"event": "startup", "env": "test"}
    assert redact_secrets(None, "info", dict(event)) == event
