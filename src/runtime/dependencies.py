"""Runtime dependency construction (session registry + upstream factory)."""

from __future__ import annotations

import logging

from src.state import RuntimeDeps
from src.state.settings import AppSettings
from src.upstream.session import ConnectFn
from src.handlers.registry import SessionRegistry
from src.upstream.factory import UpstreamSessionFactory

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None, *, connect_fn: ConnectFn | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    if not settings.upstream.api_key:
        # Misconfiguration: the service will reject every upstream connect.
        logger.warning("GEMINI_API_KEY is not set; upstream sessions will fail to authenticate")

    return RuntimeDeps(
        registry=SessionRegistry(),
        session_factory=UpstreamSessionFactory(settings.upstream, connect_fn=connect_fn),
        settings=settings,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
