"""Per-client session handler: client frames in, translated upstream events out."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket

from src.errors import RelayError, NoActiveSession
from src.handlers.registry import SessionRegistry
from src.config.websocket import WS_KEY_TYPE
from src.upstream.events import translate_server_event
from src.upstream.session import UpstreamSession
from src.upstream.factory import UpstreamSessionFactory
from src.state.connection import ClientConnection, ConnectionState

from .parser import parse_client_frame
from .dispatch import HANDLERS
from .errors import send_error, safe_send_frame

logger = logging.getLogger(__name__)


class ClientSessionHandler:
    """Drives one client's upstream session.

    No upstream session exists until the first ``config`` frame. Every
    ``RelayError`` raised while handling a frame is reported to the client as an
    ``error`` frame and the client transport stays open.
    """

    def __init__(
        self,
        connection: ClientConnection,
        *,
        registry: SessionRegistry,
        session_factory: UpstreamSessionFactory,
    ) -> None:
        self.connection = connection
        self._registry = registry
        self._session_factory = session_factory
        self._session: UpstreamSession | None = None

    @property
    def client_id(self) -> str:
        return self.connection.client_id

    @property
    def ws(self) -> WebSocket:
        return self.connection.transport

    @property
    def session(self) -> UpstreamSession | None:
        return self._session

    @property
    def default_model(self) -> str:
        return self._session_factory.default_model

    def new_upstream_session(self) -> UpstreamSession:
        return self._session_factory.new_session()

    def require_session(self) -> UpstreamSession:
        if self._session is None:
            raise NoActiveSession("send a config frame first")
        return self._session

    def register_session(self, session: UpstreamSession) -> None:
        """Claim the slot for a session about to connect."""
        self._session = session
        self._registry.put(self.client_id, session)

    def discard_session(self, session: UpstreamSession) -> None:
        if self._registry.get(self.client_id) is session:
            self._registry.remove(self.client_id)
        if self._session is session:
            self._session = None

    def attach_session(self, session: UpstreamSession) -> None:
        """Start forwarding events from a registered session that is now READY."""
        session.on_unexpected_close(self._on_upstream_closed)
        session.subscribe(self.forward_upstream_event)
        logger.info("client_id=%s upstream session ready. Active: %s", self.client_id, len(self._registry))

    async def handle_frame(self, raw: str | bytes) -> None:
        try:
            frame = parse_client_frame(raw)
            await HANDLERS[frame[WS_KEY_TYPE]](self, frame)
        except RelayError as exc:
            logger.debug("client_id=%s frame rejected: %s", self.client_id, exc)
            await send_error(self.ws, exc)
        except Exception as exc:
            logger.exception("client_id=%s failed to handle frame", self.client_id)
            await send_error(self.ws, f"internal error: {exc}")

    async def forward_upstream_event(self, event: dict[str, Any]) -> None:
        try:
            frames = translate_server_event(event)
        except Exception:
            logger.exception("client_id=%s failed to translate upstream event", self.client_id)
            return

        for frame in frames:
            if not self.connection.is_open:
                return
            if not await safe_send_frame(self.ws, frame):
                return

    async def _on_upstream_closed(self, error: RelayError) -> None:
        session = self._session
        if session is None or not self.connection.is_open:
            return
        self.discard_session(session)
        await send_error(self.ws, error)

    async def close(self) -> None:
        """Close and unregister the upstream session. Runs at most once."""
        if not self.connection.is_open:
            return
        self.connection.state = ConnectionState.CLOSED

        session = self._registry.remove(self.client_id) or self._session
        self._session = None
        if session is not None:
            await session.close()


__all__ = ["ClientSessionHandler"]
