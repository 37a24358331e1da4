"""Per-session configuration supplied by the client's config frame."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass

from src.errors import MalformedFrame
from src.config.websocket import WS_CONFIG_KEY_MODEL, WS_CONFIG_KEY_VOICE, WS_CONFIG_KEY_SYSTEM_PROMPT


@dataclass(frozen=True, slots=True)
class SessionConfig:
    model: str
    voice: str
    system_prompt: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any], *, default_model: str) -> SessionConfig:
        """Build a config from the client's ``config`` object.

        ``model`` is optional and falls back to ``default_model`` when missing
        or blank. ``voice`` must be a non-empty string; ``systemPrompt`` must be
        a string but may be empty.
        """
        model = payload.get(WS_CONFIG_KEY_MODEL)
        if model is not None and not isinstance(model, str):
            raise MalformedFrame("config.model must be a string")
        model = (model or "").strip() or default_model

        voice = payload.get(WS_CONFIG_KEY_VOICE)
        if not isinstance(voice, str) or not voice.strip():
            raise MalformedFrame("config.voice must be a non-empty string")

        system_prompt = payload.get(WS_CONFIG_KEY_SYSTEM_PROMPT)
        if not isinstance(system_prompt, str):
            raise MalformedFrame("config.systemPrompt must be a string")

        return cls(model=model, voice=voice.strip(), system_prompt=system_prompt)


__all__ = ["SessionConfig"]
