"""Test helpers: in-memory stand-ins for the client and upstream WebSockets."""

from __future__ import annotations

from .fakes import FakeConnector, FakeUpstream, FakeClientWebSocket, wait_until

__all__ = [
    "FakeClientWebSocket",
    "FakeConnector",
    "FakeUpstream",
    "wait_until",
]
