"""Decoding and translation of events received from the Gemini Live service."""

from __future__ import annotations

from typing import Any

import orjson

from src.config.websocket import (
    WS_KEY_DATA,
    WS_KEY_TYPE,
    WS_TYPE_TEXT,
    WS_TYPE_AUDIO,
    WS_TYPE_TURN_COMPLETE,
)


def decode_event(raw: str | bytes) -> dict[str, Any]:
    """Decode one upstream message. Gemini sends JSON in binary frames as well as text."""
    event = orjson.loads(raw)
    if not isinstance(event, dict):
        raise ValueError("upstream message must be a JSON object")
    return event


def translate_server_event(event: dict[str, Any]) -> list[dict[str, Any]]:
    """Map one upstream event to the client frames it produces, in part order.

    Inline-data parts become ``audio`` frames and text parts become ``text``
    frames; a ``turn_complete`` frame follows iff ``turnComplete`` is true.
    Parts of any other kind are skipped.
    """
    server_content = event.get("serverContent")
    if not isinstance(server_content, dict):
        return []

    frames: list[dict[str, Any]] = []
    model_turn = server_content.get("modelTurn")
    parts = model_turn.get("parts") if isinstance(model_turn, dict) else None
    for part in parts or []:
        if not isinstance(part, dict):
            continue
        inline_data = part.get("inlineData")
        if isinstance(inline_data, dict) and "data" in inline_data:
            frames.append({WS_KEY_TYPE: WS_TYPE_AUDIO, WS_KEY_DATA: inline_data["data"]})
        elif isinstance(part.get("text"), str):
            frames.append({WS_KEY_TYPE: WS_TYPE_TEXT, WS_KEY_DATA: part["text"]})

    if server_content.get("turnComplete") is True:
        frames.append({WS_KEY_TYPE: WS_TYPE_TURN_COMPLETE, WS_KEY_DATA: True})
    return frames


__all__ = ["decode_event", "translate_server_event"]
