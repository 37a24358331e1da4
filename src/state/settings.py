"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UpstreamSettings:
    api_key: str
    ws_uri: str
    model: str
    setup_timeout_s: float
    max_message_bytes: int


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    ws_endpoint_path: str
    cors_allow_origins: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AppSettings:
    upstream: UpstreamSettings
    server: ServerSettings


__all__ = [
    "AppSettings",
    "ServerSettings",
    "UpstreamSettings",
]
