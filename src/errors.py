"""Shared error types for the Gemini Live relay.

Every error carries a ``code`` equal to its class name; the client sees it as
the prefix of the ``error`` frame message.
"""

from __future__ import annotations


class RelayError(Exception):
    """Base class for errors reported to the client as ``error`` frames."""

    code: str = "RelayError"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.code}: {self.detail}"
        return self.code


class ConfigMissing(RelayError):
    """connect() was attempted before configure()."""

    code = "ConfigMissing"


class DuplicateConfig(RelayError):
    """A second config frame arrived on the same client connection."""

    code = "DuplicateConfig"


class NoActiveSession(RelayError):
    """A media frame arrived before a session was configured."""

    code = "NoActiveSession"


class StateError(RelayError):
    """The operation is invalid for the session's current lifecycle state."""

    code = "StateError"


class UpstreamTransportError(RelayError):
    """Network or protocol failure talking to the AI service."""

    code = "UpstreamTransportError"


class SetupTimeout(UpstreamTransportError):
    """No setup acknowledgment arrived within the configured wait."""

    code = "SetupTimeout"


class MalformedFrame(RelayError):
    """A client frame could not be parsed or is not recognized."""

    code = "MalformedFrame"


__all__ = [
    "ConfigMissing",
    "DuplicateConfig",
    "MalformedFrame",
    "NoActiveSession",
    "RelayError",
    "SetupTimeout",
    "StateError",
    "UpstreamTransportError",
]
