"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging

from fastapi import WebSocket

from src.state import RuntimeDeps, ClientConnection

from .session import ClientSessionHandler
from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    await ws.accept()

    handler = ClientSessionHandler(
        ClientConnection(transport=ws),
        registry=runtime_deps.registry,
        session_factory=runtime_deps.session_factory,
    )
    logger.info("WebSocket connection accepted client_id=%s", handler.client_id)
    try:
        await run_message_loop(ws, handler)
    finally:
        try:
            await handler.close()
        except Exception:
            logger.exception("client_id=%s session cleanup failed", handler.client_id)
        logger.info(
            "WebSocket connection closed client_id=%s. Active: %s",
            handler.client_id,
            len(runtime_deps.registry),
        )


__all__ = ["handle_websocket_connection"]
