"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from src.state.settings import AppSettings
    from src.upstream.factory import UpstreamSessionFactory
    from src.handlers.registry import SessionRegistry


@dataclass(slots=True)
class RuntimeDeps:
    registry: SessionRegistry
    session_factory: UpstreamSessionFactory
    settings: AppSettings

    async def shutdown(self) -> None:
        for client_id in self.registry.client_ids():
            session = self.registry.remove(client_id)
            if session is None:
                continue
            try:
                await session.close()
            except Exception:
                logger.exception("upstream session close failed client_id=%s", client_id)


__all__ = ["RuntimeDeps"]
