"""Client-facing WebSocket protocol constants."""

from __future__ import annotations

ENV_WS_ENDPOINT_PATH = "WS_ENDPOINT_PATH"

# Browsers connect to ws://host:port with no path.
DEFAULT_WS_ENDPOINT_PATH = "/"

# Frame keys
WS_KEY_TYPE = "type"
WS_KEY_DATA = "data"
WS_KEY_CONFIG = "config"
WS_KEY_MESSAGE = "message"

# Client -> server frame types
WS_TYPE_CONFIG = "config"
WS_TYPE_AUDIO = "audio"
WS_TYPE_IMAGE = "image"
WS_TYPE_TEXT = "text"

CLIENT_FRAME_TYPES = frozenset({WS_TYPE_CONFIG, WS_TYPE_AUDIO, WS_TYPE_IMAGE, WS_TYPE_TEXT})

# Server -> client frame types (audio/text reuse the names above)
WS_TYPE_TURN_COMPLETE = "turn_complete"
WS_TYPE_ERROR = "error"

# Config payload keys (camelCase on the wire)
WS_CONFIG_KEY_MODEL = "model"
WS_CONFIG_KEY_VOICE = "voice"
WS_CONFIG_KEY_SYSTEM_PROMPT = "systemPrompt"

__all__ = [
    "ENV_WS_ENDPOINT_PATH",
    "DEFAULT_WS_ENDPOINT_PATH",
    "WS_KEY_TYPE",
    "WS_KEY_DATA",
    "WS_KEY_CONFIG",
    "WS_KEY_MESSAGE",
    "WS_TYPE_CONFIG",
    "WS_TYPE_AUDIO",
    "WS_TYPE_IMAGE",
    "WS_TYPE_TEXT",
    "CLIENT_FRAME_TYPES",
    "WS_TYPE_TURN_COMPLETE",
    "WS_TYPE_ERROR",
    "WS_CONFIG_KEY_MODEL",
    "WS_CONFIG_KEY_VOICE",
    "WS_CONFIG_KEY_SYSTEM_PROMPT",
]
