from __future__ import annotations

from fastapi.testclient import TestClient

from src.server import create_app
from src.state.settings import AppSettings, ServerSettings, UpstreamSettings
from tests.utils.fakes import FakeConnector, FakeUpstream

SETTINGS = AppSettings(
    upstream=UpstreamSettings(
        api_key="secret",
        ws_uri="wss://example.test/ws",
        model="gemini-test",
        setup_timeout_s=1.0,
        max_message_bytes=1024,
    ),
    server=ServerSettings(host="127.0.0.1", port=8000, ws_endpoint_path="/", cors_allow_origins=("*",)),
)


def test_health_endpoints() -> None:
    with TestClient(create_app(SETTINGS, connect_fn=FakeConnector())) as client:
        for path in ("/", "/health", "/healthz"):
            resp = client.get(path)
            assert resp.status_code == 200
            assert resp.json() == {"status": "ok"}


def test_relay_round_trip() -> None:
    upstream = FakeUpstream(events=[{"serverContent": {"modelTurn": {"parts": [{"text": "hi"}]}, "turnComplete": True}}])
    app = create_app(SETTINGS, connect_fn=FakeConnector(upstream))

    with TestClient(app) as client:
        with client.websocket_connect("/") as ws:
            ws.send_json({"type": "audio", "data": "AAAA"})
            assert ws.receive_json()["message"].startswith("NoActiveSession")

            ws.send_json({"type": "config", "config": {"voice": "Puck", "systemPrompt": "You are helpful"}})
            assert ws.receive_json() == {"type": "text", "data": "hi"}
            assert ws.receive_json() == {"type": "turn_complete", "data": True}

            ws.send_json({"type": "text", "data": "hello"})
            ws.send_json({"foo": "bar"})
            assert ws.receive_json()["message"].startswith("MalformedFrame")

        registry = app.state.runtime_deps.registry

    assert upstream.sent[0]["setup"]["model"] == "models/gemini-test"
    assert upstream.sent[1]["client_content"]["turns"][0]["parts"] == [{"text": "hello"}]
    assert upstream.closed
    assert len(registry) == 0
