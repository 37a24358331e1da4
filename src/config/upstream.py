"""Upstream (Gemini Live) configuration: env names and defaults."""

from __future__ import annotations

ENV_GEMINI_MODEL = "GEMINI_MODEL"
ENV_GEMINI_WS_URI = "GEMINI_WS_URI"
ENV_GEMINI_SETUP_TIMEOUT_S = "GEMINI_SETUP_TIMEOUT_S"
ENV_WS_MAX_MESSAGE_BYTES = "WS_MAX_MESSAGE_BYTES"

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash-exp"
DEFAULT_GEMINI_WS_URI = (
    "wss://generativelanguage.googleapis.com/ws/"
    "google.ai.generativelanguage.v1alpha.GenerativeService.BidiGenerateContent"
)

# Bounded wait for the single setup acknowledgment.
DEFAULT_GEMINI_SETUP_TIMEOUT_S = 15.0

# Model audio turns arrive as large base64 frames.
DEFAULT_WS_MAX_MESSAGE_BYTES = 16 * 1024 * 1024

# Setup message constants
MODEL_PATH_PREFIX = "models/"
RESPONSE_MODALITY_AUDIO = "AUDIO"
MIME_TYPE_AUDIO = "audio/pcm"
MIME_TYPE_IMAGE = "image/jpeg"
ROLE_USER = "user"

__all__ = [
    "ENV_GEMINI_MODEL",
    "ENV_GEMINI_WS_URI",
    "ENV_GEMINI_SETUP_TIMEOUT_S",
    "ENV_WS_MAX_MESSAGE_BYTES",
    "DEFAULT_GEMINI_MODEL",
    "DEFAULT_GEMINI_WS_URI",
    "DEFAULT_GEMINI_SETUP_TIMEOUT_S",
    "DEFAULT_WS_MAX_MESSAGE_BYTES",
    "MODEL_PATH_PREFIX",
    "RESPONSE_MODALITY_AUDIO",
    "MIME_TYPE_AUDIO",
    "MIME_TYPE_IMAGE",
    "ROLE_USER",
]
