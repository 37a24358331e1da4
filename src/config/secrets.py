"""Secrets configuration."""

from __future__ import annotations

ENV_GEMINI_API_KEY = "GEMINI_API_KEY"

__all__ = ["ENV_GEMINI_API_KEY"]
