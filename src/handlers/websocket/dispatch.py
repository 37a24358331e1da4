"""Dispatch handlers for client frames, keyed by frame type."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any
from collections.abc import Callable, Awaitable

from src.errors import DuplicateConfig
from src.state.session import SessionConfig
from src.config.websocket import (
    WS_KEY_DATA,
    WS_TYPE_TEXT,
    WS_KEY_CONFIG,
    WS_TYPE_AUDIO,
    WS_TYPE_IMAGE,
    WS_TYPE_CONFIG,
)

if TYPE_CHECKING:
    from .session import ClientSessionHandler

HandlerFn = Callable[["ClientSessionHandler", dict[str, Any]], Awaitable[None]]


async def _handle_config(handler: ClientSessionHandler, frame: dict[str, Any]) -> None:
    if handler.session is not None:
        raise DuplicateConfig("a session is already configured for this connection")

    config = SessionConfig.from_payload(frame[WS_KEY_CONFIG], default_model=handler.default_model)
    session = handler.new_upstream_session()
    session.configure(config)
    handler.register_session(session)
    try:
        await session.connect()
    except (Exception, asyncio.CancelledError):
        # connect() already left the session CLOSED.
        handler.discard_session(session)
        raise
    handler.attach_session(session)


async def _handle_audio(handler: ClientSessionHandler, frame: dict[str, Any]) -> None:
    await handler.require_session().send_audio(frame[WS_KEY_DATA])


async def _handle_image(handler: ClientSessionHandler, frame: dict[str, Any]) -> None:
    await handler.require_session().send_image(frame[WS_KEY_DATA])


async def _handle_text(handler: ClientSessionHandler, frame: dict[str, Any]) -> None:
    await handler.require_session().send_text(frame[WS_KEY_DATA])


HANDLERS: dict[str, HandlerFn] = {
    WS_TYPE_CONFIG: _handle_config,
    WS_TYPE_AUDIO: _handle_audio,
    WS_TYPE_IMAGE: _handle_image,
    WS_TYPE_TEXT: _handle_text,
}

__all__ = ["HANDLERS"]
