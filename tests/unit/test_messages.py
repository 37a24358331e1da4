from __future__ import annotations

from src.state.session import SessionConfig
from src.upstream.messages import (
    model_path,
    build_text_message,
    build_media_message,
    build_setup_message,
)


def test_setup_message_encodes_model_voice_and_prompt() -> None:
    config = SessionConfig(model="gemini-2.0-flash-exp", voice="Puck", system_prompt="You are helpful")
    assert build_setup_message(config) == {
        "setup": {
            "model": "models/gemini-2.0-flash-exp",
            "generation_config": {
                "response_modalities": ["AUDIO"],
                "speech_config": {"voice_config": {"prebuilt_voice_config": {"voice_name": "Puck"}}},
            },
            "system_instruction": {"parts": [{"text": "You are helpful"}]},
        }
    }


def test_model_path_is_not_prefixed_twice() -> None:
    assert model_path("models/gemini-x") == "models/gemini-x"
    assert model_path("gemini-x") == "models/gemini-x"


def test_media_and_text_envelopes() -> None:
    assert build_media_message("AAAA", "image/jpeg") == {
        "realtime_input": {"media_chunks": [{"data": "AAAA", "mime_type": "image/jpeg"}]}
    }
    assert build_text_message("hello") == {
        "client_content": {"turns": [{"role": "user", "parts": [{"text": "hello"}]}], "turn_complete": True}
    }
