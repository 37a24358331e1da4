"""Client frame parsing/validation."""

from __future__ import annotations

from typing import Any

import orjson

from src.errors import MalformedFrame
from src.config.websocket import (
    WS_KEY_DATA,
    WS_KEY_TYPE,
    WS_KEY_CONFIG,
    WS_TYPE_TEXT,
    WS_TYPE_CONFIG,
    CLIENT_FRAME_TYPES,
)


def parse_client_frame(raw: str | bytes) -> dict[str, Any]:
    """Validate one client frame and return it with a normalized ``type``.

    ``config`` frames must carry a ``config`` object; ``audio``/``image``
    frames a non-empty base64 string in ``data``; ``text`` frames any string in
    ``data``, forwarded as is.
    """
    try:
        msg = orjson.loads(raw)
    except Exception as exc:
        raise MalformedFrame(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise MalformedFrame("frame must be a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str) or not msg_type.strip():
        raise MalformedFrame("frame missing non-empty 'type'")
    msg_type = msg_type.strip()
    if msg_type not in CLIENT_FRAME_TYPES:
        raise MalformedFrame(f"frame type '{msg_type}' is not supported")

    if msg_type == WS_TYPE_CONFIG:
        if not isinstance(msg.get(WS_KEY_CONFIG), dict):
            raise MalformedFrame("config frame missing 'config' object")
    elif msg_type == WS_TYPE_TEXT:
        if not isinstance(msg.get(WS_KEY_DATA), str):
            raise MalformedFrame("text frame missing string 'data'")
    else:
        data = msg.get(WS_KEY_DATA)
        if not isinstance(data, str) or not data.strip():
            raise MalformedFrame(f"{msg_type} frame missing non-empty base64 'data'")

    msg[WS_KEY_TYPE] = msg_type
    return msg


__all__ = ["parse_client_frame"]
