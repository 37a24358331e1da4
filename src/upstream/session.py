"""One WebSocket session with the Gemini Live service."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable, Awaitable
from urllib.parse import urlparse, parse_qsl, urlencode, urlunparse

import orjson
import websockets
from websockets.exceptions import ConnectionClosed

from src.state.session import SessionConfig
from src.config.upstream import MIME_TYPE_AUDIO, MIME_TYPE_IMAGE, DEFAULT_WS_MAX_MESSAGE_BYTES
from src.errors import StateError, SetupTimeout, ConfigMissing, UpstreamTransportError

from .state import SessionState
from .events import decode_event
from .messages import build_text_message, build_media_message, build_setup_message

logger = logging.getLogger(__name__)

EventCallback = Callable[[dict[str, Any]], Awaitable[None]]
CloseListener = Callable[[UpstreamTransportError], Awaitable[None]]
ConnectFn = Callable[..., Awaitable[Any]]


def build_upstream_uri(ws_uri: str, api_key: str) -> str:
    """Set the ``key`` query parameter the service authenticates with."""
    parsed = urlparse(ws_uri)
    query_params = dict(parse_qsl(parsed.query, keep_blank_values=True))
    query_params["key"] = api_key
    return urlunparse((parsed.scheme, parsed.netloc, parsed.path, parsed.params, urlencode(query_params), parsed.fragment))


class UpstreamSession:
    """Owns exactly one upstream WebSocket and its setup handshake.

    Lifecycle: UNCONFIGURED -> CONNECTING -> READY, or CLOSED from any state.
    Media may only flow once the single setup acknowledgment has been received.
    Inbound events after the acknowledgment go to the one subscriber, in order.
    """

    def __init__(
        self,
        *,
        ws_uri: str,
        api_key: str,
        setup_timeout_s: float,
        max_message_bytes: int = DEFAULT_WS_MAX_MESSAGE_BYTES,
        connect_fn: ConnectFn | None = None,
    ) -> None:
        self._ws_uri = ws_uri
        self._api_key = api_key
        self._setup_timeout_s = float(setup_timeout_s)
        self._max_message_bytes = int(max_message_bytes)
        self._connect_fn = connect_fn or websockets.connect

        self._ws: Any | None = None
        self._config: SessionConfig | None = None
        self._state = SessionState.UNCONFIGURED

        self._callback: EventCallback | None = None
        self._close_listener: CloseListener | None = None
        self._reader_task: asyncio.Task | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def config(self) -> SessionConfig | None:
        return self._config

    def configure(self, config: SessionConfig) -> None:
        if self._state is not SessionState.UNCONFIGURED:
            raise StateError(f"cannot configure a session that is {self._state.value}")
        self._config = config

    async def connect(self) -> dict[str, Any]:
        """Open the transport, send setup and wait for the acknowledgment.

        Returns the decoded acknowledgment. Any failure during the handshake
        leaves the session CLOSED.
        """
        if self._state is not SessionState.UNCONFIGURED:
            raise StateError(f"cannot connect a session that is {self._state.value}")
        if self._config is None:
            raise ConfigMissing("configuration must be set before connecting")

        self._state = SessionState.CONNECTING
        try:
            ack = await asyncio.wait_for(self._open_and_setup(self._config), timeout=self._setup_timeout_s)
        except TimeoutError:
            await self.close()
            raise SetupTimeout(f"no setup acknowledgment within {self._setup_timeout_s:g}s") from None
        except asyncio.CancelledError:
            await self.close()
            raise
        except Exception as exc:
            await self.close()
            raise UpstreamTransportError(str(exc) or type(exc).__name__) from exc

        if self._state is not SessionState.CONNECTING:
            # close() ran while the handshake was in flight.
            await self._close_transport()
            raise StateError("session was closed during setup")

        self._state = SessionState.READY
        logger.info("upstream session ready model=%s voice=%s", self._config.model, self._config.voice)
        if self._callback is not None:
            self._start_reader()
        return ack

    async def _open_and_setup(self, config: SessionConfig) -> dict[str, Any]:
        self._ws = await self._connect_fn(
            build_upstream_uri(self._ws_uri, self._api_key),
            additional_headers={"Content-Type": "application/json"},
            max_size=self._max_message_bytes,
        )
        await self._ws.send(orjson.dumps(build_setup_message(config)).decode("utf-8"))
        return decode_event(await self._ws.recv())

    async def send_audio(self, data: str) -> None:
        await self._send(build_media_message(data, MIME_TYPE_AUDIO))

    async def send_image(self, data: str) -> None:
        await self._send(build_media_message(data, MIME_TYPE_IMAGE))

    async def send_text(self, text: str) -> None:
        await self._send(build_text_message(text))

    async def _send(self, message: dict[str, Any]) -> None:
        if self._state is not SessionState.READY or self._ws is None:
            raise StateError(f"cannot send on a session that is {self._state.value}")
        try:
            await self._ws.send(orjson.dumps(message).decode("utf-8"))
        except ConnectionClosed as exc:
            raise UpstreamTransportError(f"upstream connection closed: {exc}") from exc
        except Exception as exc:
            raise UpstreamTransportError(str(exc) or type(exc).__name__) from exc

    def subscribe(self, callback: EventCallback) -> None:
        if self._state is SessionState.CLOSED:
            raise StateError("cannot subscribe to a closed session")
        if self._callback is not None:
            raise StateError("session already has a subscriber")
        self._callback = callback
        if self._state is SessionState.READY:
            self._start_reader()

    def on_unexpected_close(self, listener: CloseListener) -> None:
        """Register the listener told when the service drops a READY session."""
        self._close_listener = listener

    def _start_reader(self) -> None:
        if self._reader_task is None:
            self._reader_task = asyncio.create_task(self._read_loop())

    async def _read_loop(self) -> None:
        ws = self._ws
        callback = self._callback
        if ws is None or callback is None:
            return

        detail = "upstream connection closed"
        try:
            async for raw in ws:
                try:
                    event = decode_event(raw)
                except Exception:
                    logger.warning("dropping undecodable upstream message", exc_info=True)
                    continue
                try:
                    await callback(event)
                except Exception:
                    logger.exception("upstream event callback failed")
        except ConnectionClosed as exc:
            detail = f"upstream connection closed: {exc}"
        except Exception as exc:
            logger.exception("upstream reader failed")
            detail = f"upstream reader failed: {exc}"

        if self._state is SessionState.CLOSED:
            return
        logger.info("upstream session dropped by service: %s", detail)
        self._reader_task = None
        await self.close()
        if self._close_listener is not None:
            try:
                await self._close_listener(UpstreamTransportError(detail))
            except Exception:
                logger.exception("upstream close listener failed")

    async def close(self) -> None:
        """Close the transport and stop delivery. Safe to call more than once."""
        if self._state is SessionState.CLOSED:
            return
        self._state = SessionState.CLOSED

        task, self._reader_task = self._reader_task, None
        if task is not None and task is not asyncio.current_task():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

        await self._close_transport()

    async def _close_transport(self) -> None:
        ws, self._ws = self._ws, None
        if ws is None:
            return
        try:
            await ws.close()
        except Exception:
            logger.debug("upstream transport close failed", exc_info=True)


__all__ = ["UpstreamSession", "build_upstream_uri"]
