"""Factory for upstream sessions bound to the process-wide upstream settings."""

from __future__ import annotations

from src.state.settings import UpstreamSettings

from .session import ConnectFn, UpstreamSession


class UpstreamSessionFactory:
    def __init__(self, settings: UpstreamSettings, *, connect_fn: ConnectFn | None = None) -> None:
        self._settings = settings
        self._connect_fn = connect_fn

    @property
    def default_model(self) -> str:
        return self._settings.model

    def new_session(self) -> UpstreamSession:
        return UpstreamSession(
            ws_uri=self._settings.ws_uri,
            api_key=self._settings.api_key,
            setup_timeout_s=self._settings.setup_timeout_s,
            max_message_bytes=self._settings.max_message_bytes,
            connect_fn=self._connect_fn,
        )


__all__ = ["UpstreamSessionFactory"]
