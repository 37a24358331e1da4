from __future__ import annotations

import pytest

from src.runtime.settings import load_settings
from src.config.upstream import DEFAULT_GEMINI_MODEL, DEFAULT_GEMINI_WS_URI, DEFAULT_GEMINI_SETUP_TIMEOUT_S

_ENV_NAMES = (
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "GEMINI_WS_URI",
    "GEMINI_SETUP_TIMEOUT_S",
    "WS_MAX_MESSAGE_BYTES",
    "HOST",
    "PORT",
    "WS_ENDPOINT_PATH",
    "CORS_ALLOW_ORIGINS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.upstream.api_key == ""
    assert settings.upstream.model == DEFAULT_GEMINI_MODEL
    assert settings.upstream.ws_uri == DEFAULT_GEMINI_WS_URI
    assert settings.upstream.setup_timeout_s == DEFAULT_GEMINI_SETUP_TIMEOUT_S
    assert settings.server.port == 8000
    assert settings.server.ws_endpoint_path == "/"
    assert settings.server.cors_allow_origins == ("*",)


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", " secret ")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-live-test")
    monkeypatch.setenv("GEMINI_SETUP_TIMEOUT_S", "2.5")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("WS_ENDPOINT_PATH", "live")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")

    settings = load_settings()

    assert settings.upstream.api_key == "secret"
    assert settings.upstream.model == "gemini-live-test"
    assert settings.upstream.setup_timeout_s == 2.5
    assert settings.server.port == 9001
    assert settings.server.ws_endpoint_path == "/live"
    assert settings.server.cors_allow_origins == ("https://a.example", "https://b.example")


def test_bad_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_SETUP_TIMEOUT_S", "-1")
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.setenv("WS_MAX_MESSAGE_BYTES", "0")

    settings = load_settings()

    assert settings.upstream.setup_timeout_s == DEFAULT_GEMINI_SETUP_TIMEOUT_S
    assert settings.upstream.max_message_bytes > 0
    assert settings.server.port == 8000
