"""Load runtime settings.

Env names and defaults live in `src/config/*`; this module parses the
environment into the structured dataclasses used by the rest of the server.
Unparseable values fall back to their defaults.
"""

from __future__ import annotations

import os

from src.config.secrets import ENV_GEMINI_API_KEY
from src.state.settings import AppSettings, ServerSettings, UpstreamSettings
from src.config.websocket import ENV_WS_ENDPOINT_PATH, DEFAULT_WS_ENDPOINT_PATH
from src.config.server import (
    ENV_HOST,
    ENV_PORT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_CORS_ALLOW_ORIGINS,
    DEFAULT_CORS_ALLOW_ORIGINS,
)
from src.config.upstream import (
    ENV_GEMINI_MODEL,
    ENV_GEMINI_WS_URI,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_GEMINI_WS_URI,
    ENV_WS_MAX_MESSAGE_BYTES,
    ENV_GEMINI_SETUP_TIMEOUT_S,
    DEFAULT_WS_MAX_MESSAGE_BYTES,
    DEFAULT_GEMINI_SETUP_TIMEOUT_S,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    items = tuple(item.strip() for item in raw.split(",") if item.strip())
    return items or default


def _normalize_path(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def _load_upstream_settings() -> UpstreamSettings:
    setup_timeout = _float_env(ENV_GEMINI_SETUP_TIMEOUT_S, DEFAULT_GEMINI_SETUP_TIMEOUT_S)
    if setup_timeout <= 0:
        setup_timeout = DEFAULT_GEMINI_SETUP_TIMEOUT_S

    max_message_bytes = _int_env(ENV_WS_MAX_MESSAGE_BYTES, DEFAULT_WS_MAX_MESSAGE_BYTES)
    if max_message_bytes <= 0:
        max_message_bytes = DEFAULT_WS_MAX_MESSAGE_BYTES

    return UpstreamSettings(
        api_key=(os.getenv(ENV_GEMINI_API_KEY) or "").strip(),
        ws_uri=_str_env(ENV_GEMINI_WS_URI, DEFAULT_GEMINI_WS_URI),
        model=_str_env(ENV_GEMINI_MODEL, DEFAULT_GEMINI_MODEL),
        setup_timeout_s=setup_timeout,
        max_message_bytes=max_message_bytes,
    )


def _load_server_settings() -> ServerSettings:
    port = _int_env(ENV_PORT, DEFAULT_PORT)
    if port <= 0 or port > 65535:
        port = DEFAULT_PORT

    return ServerSettings(
        host=_str_env(ENV_HOST, DEFAULT_HOST),
        port=port,
        ws_endpoint_path=_normalize_path(_str_env(ENV_WS_ENDPOINT_PATH, DEFAULT_WS_ENDPOINT_PATH)),
        cors_allow_origins=_list_env(ENV_CORS_ALLOW_ORIGINS, DEFAULT_CORS_ALLOW_ORIGINS),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        upstream=_load_upstream_settings(),
        server=_load_server_settings(),
    )


__all__ = ["load_settings"]
