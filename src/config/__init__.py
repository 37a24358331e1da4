"""Configuration module exports (env names and defaults only)."""

from .secrets import ENV_GEMINI_API_KEY
from .upstream import DEFAULT_GEMINI_MODEL, DEFAULT_GEMINI_WS_URI

__all__ = [
    "DEFAULT_GEMINI_MODEL",
    "DEFAULT_GEMINI_WS_URI",
    "ENV_GEMINI_API_KEY",
]
