"""Builders for messages sent to the Gemini Live service."""

from __future__ import annotations

from typing import Any

from src.state.session import SessionConfig
from src.config.upstream import ROLE_USER, MODEL_PATH_PREFIX, RESPONSE_MODALITY_AUDIO


def model_path(model: str) -> str:
    return model if model.startswith(MODEL_PATH_PREFIX) else f"{MODEL_PATH_PREFIX}{model}"


def build_setup_message(config: SessionConfig) -> dict[str, Any]:
    return {
        "setup": {
            "model": model_path(config.model),
            "generation_config": {
                "response_modalities": [RESPONSE_MODALITY_AUDIO],
                "speech_config": {
                    "voice_config": {
                        "prebuilt_voice_config": {"voice_name": config.voice},
                    },
                },
            },
            "system_instruction": {"parts": [{"text": config.system_prompt}]},
        },
    }


def build_media_message(data: str, mime_type: str) -> dict[str, Any]:
    return {"realtime_input": {"media_chunks": [{"data": data, "mime_type": mime_type}]}}


def build_text_message(text: str) -> dict[str, Any]:
    return {
        "client_content": {
            "turns": [{"role": ROLE_USER, "parts": [{"text": text}]}],
            "turn_complete": True,
        },
    }


__all__ = [
    "build_media_message",
    "build_setup_message",
    "build_text_message",
    "model_path",
]
