"""WebSocket receive loop for one client connection."""

from __future__ import annotations

import asyncio
import logging
import contextlib

from fastapi import WebSocket, WebSocketDisconnect

from .session import ClientSessionHandler

logger = logging.getLogger(__name__)


async def _receive_frame(ws: WebSocket) -> str | bytes:
    message = await ws.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(code=message.get("code", 1000), reason=message.get("reason"))
    text = message.get("text")
    if text is not None:
        return text
    # Binary frames carry the same JSON; the parser rejects anything else.
    return message.get("bytes") or b""


async def _consume_frames(frames: asyncio.Queue[str | bytes], handler: ClientSessionHandler) -> None:
    while True:
        raw = await frames.get()
        await handler.handle_frame(raw)


async def run_message_loop(ws: WebSocket, handler: ClientSessionHandler) -> None:
    """Handle client frames one at a time until the client goes away.

    Frames are received while earlier ones are still being handled, so a
    disconnect cancels in-flight work such as an upstream setup handshake.
    Transport errors are logged here; upstream cleanup is the caller's job.
    """
    frames: asyncio.Queue[str | bytes] = asyncio.Queue()
    consumer = asyncio.create_task(_consume_frames(frames, handler))
    try:
        while True:
            frames.put_nowait(await _receive_frame(ws))
    except WebSocketDisconnect as exc:
        logger.debug("client_id=%s disconnected code=%s", handler.client_id, exc.code)
    except Exception:
        logger.exception("client_id=%s WebSocket transport error", handler.client_id)
    finally:
        consumer.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await consumer


__all__ = ["run_message_loop"]
