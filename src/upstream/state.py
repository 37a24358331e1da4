"""Upstream session lifecycle states."""

from __future__ import annotations

from enum import Enum


class SessionState(str, Enum):
    UNCONFIGURED = "unconfigured"
    CONNECTING = "connecting"
    READY = "ready"
    CLOSED = "closed"


__all__ = ["SessionState"]
