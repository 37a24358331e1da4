"""HTTP server configuration: env names and defaults."""

from __future__ import annotations

ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_CORS_ALLOW_ORIGINS = "CORS_ALLOW_ORIGINS"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_CORS_ALLOW_ORIGINS: tuple[str, ...] = ("*",)

__all__ = [
    "ENV_HOST",
    "ENV_PORT",
    "ENV_CORS_ALLOW_ORIGINS",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_CORS_ALLOW_ORIGINS",
]
