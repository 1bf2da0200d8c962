"""Tests for environment-driven settings."""

from unsaid.core.config import Settings


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("HISTORY_LIMIT", "20")
    monkeypatch.setenv("GEMINI_MODELS", '["gemini-test"]')
    monkeypatch.setenv("SOME_UNRELATED_VAR", "ignored")

    settings = Settings(_env_file=None)

    assert settings.HISTORY_LIMIT == 20
    assert settings.GEMINI_MODELS == ["gemini-test"]


def test_defaults(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("RATE_LIMIT_REQUESTS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.GEMINI_API_KEY is None
    assert settings.RATE_LIMIT_REQUESTS == 10
    assert settings.GEMINI_MODELS[0] == "gemini-2.5-flash-lite"
