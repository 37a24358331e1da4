from .runtime import RuntimeDeps
from .session import SessionConfig
from .settings import AppSettings
from .connection import ClientConnection, ConnectionState

__all__ = ["AppSettings", "ClientConnection", "ConnectionState", "RuntimeDeps", "SessionConfig"]
