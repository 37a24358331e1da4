from .state import SessionState
from .session import UpstreamSession
from .factory import UpstreamSessionFactory

__all__ = ["SessionState", "UpstreamSession", "UpstreamSessionFactory"]
