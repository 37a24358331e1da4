"""Client id -> upstream session mapping, scoped to the server's lifetime."""

from __future__ import annotations

from src.upstream.session import UpstreamSession


class SessionRegistry:
    """Locates a client's upstream session so it can be closed on disconnect.

    Each key is only ever mutated by its own client's handler, so plain dict
    operations on the event loop are sufficient.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, UpstreamSession] = {}

    def put(self, client_id: str, session: UpstreamSession) -> None:
        self._sessions[client_id] = session

    def get(self, client_id: str) -> UpstreamSession | None:
        return self._sessions.get(client_id)

    def remove(self, client_id: str) -> UpstreamSession | None:
        return self._sessions.pop(client_id, None)

    def client_ids(self) -> list[str]:
        return list(self._sessions)

    def __len__(self) -> int:
        return len(self._sessions)


__all__ = ["SessionRegistry"]
