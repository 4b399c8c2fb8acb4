"""Tests for environment-driven settings."""

from __future__ import annotations

from mdlinks.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in (
        "MDLINKS_REQUEST_TIMEOUT",
        "MDLINKS_USER_AGENT",
        "MDLINKS_MAX_CONNECTIONS",
        "MDLINKS_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings()

    assert s.request_timeout == 10.0
    assert s.max_connections == 100
    assert s.verbose is False
    assert "mdlinks" in s.user_agent


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("MDLINKS_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("MDLINKS_MAX_CONNECTIONS", "8")
    monkeypatch.setenv("MDLINKS_VERBOSE", "true")

    s = Settings()

    assert s.request_timeout == 2.5
    assert s.max_connections == 8
    assert s.verbose is True
