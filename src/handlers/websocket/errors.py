"""Send helpers for client-bound frames."""

from __future__ import annotations

import logging
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect

from src.config.websocket import WS_KEY_TYPE, WS_TYPE_ERROR, WS_KEY_MESSAGE

logger = logging.getLogger(__name__)


def build_error_frame(message: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_TYPE_ERROR, WS_KEY_MESSAGE: message}


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_send_frame(ws: WebSocket, frame: dict[str, Any]) -> bool:
    return await safe_send_text(ws, orjson.dumps(frame).decode("utf-8"))


async def send_error(ws: WebSocket, error: Exception | str) -> bool:
    return await safe_send_frame(ws, build_error_frame(str(error)))


__all__ = [
    "build_error_frame",
    "safe_send_frame",
    "safe_send_text",
    "send_error",
]
