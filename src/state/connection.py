"""Per-connection identity for accepted client WebSockets."""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Any
from dataclasses import field, dataclass


class ConnectionState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


def new_client_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True)
class ClientConnection:
    transport: Any
    client_id: str = field(default_factory=new_client_id)
    state: ConnectionState = ConnectionState.OPEN

    @property
    def is_open(self) -> bool:
        return self.state is ConnectionState.OPEN


__all__ = ["ClientConnection", "ConnectionState", "new_client_id"]
