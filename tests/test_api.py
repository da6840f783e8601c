import pytest
from fastapi.testclient import TestClient

from mandi_relay.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def _connect(ws):
    connected = ws.receive_json()
    assert connected["type"] == "connected"
    return connected["connectionId"]


def _sync(ws):
    """Round-trip a ping so every earlier frame on this socket has been handled."""
    ws.send_json({"type": "ping"})
    assert ws.receive_json() == {"type": "pong"}


# === REST ===

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "OK"
    assert body["service"] == "AI Mandi Backend"
    assert "timestamp" in body
    assert {"active_connections", "active_rooms", "active_sessions"} <= body.keys()

    assert client.get("/api/health").json() == {"status": "ok"}


def test_translate_endpoint(client):
    r = client.post("/api/translate", json={"text": "hello", "fromLanguage": "en", "toLanguage": "hi"})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["translation"]["translatedText"] == "नमस्ते"
    assert body["translation"]["confidence"] == 0.9
    assert body["translation"]["originalText"] == "hello"


def test_translate_same_language_echoes(client):
    r = client.post("/api/translate", json={"text": "price", "fromLanguage": "ta", "toLanguage": "ta"})
    assert r.status_code == 200
    translation = r.json()["translation"]
    assert translation["translatedText"] == "price"
    assert translation["confidence"] == 1.0


def test_translate_requires_all_fields(client):
    r = client.post("/api/translate", json={"text": "hello"})
    assert r.status_code == 400
    assert r.json() == {
        "success": False,
        "error": {
            "code": "INVALID_INPUT",
            "message": "Text, fromLanguage, and toLanguage are required",
        },
    }


@pytest.mark.parametrize("payload", [["hello"], "hello", 42, {"text": 5, "fromLanguage": "en", "toLanguage": "hi"}])
def test_translate_rejects_non_object_body(client, payload):
    r = client.post("/api/translate", json=payload)
    assert r.status_code == 400
    assert r.json()["success"] is False
    assert r.json()["error"]["code"] == "INVALID_INPUT"


def test_translate_without_body_is_invalid_input(client):
    r = client.post("/api/translate")
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "INVALID_INPUT"


def test_supported_languages(client):
    r = client.get("/api/languages/supported")
    assert r.status_code == 200
    languages = r.json()["languages"]
    assert {"code": "hi", "name": "Hindi", "nativeName": "हिंदी"} in languages


def test_unknown_endpoint_returns_structured_404(client):
    r = client.get("/api/non-existent")
    assert r.status_code == 404
    assert r.json()["error"] == {"code": "NOT_FOUND", "message": "Endpoint not found"}


# === WebSocket ===

def test_websocket_chat_flow(client):
    with client.websocket_connect("/ws") as ws_b:
        _connect(ws_b)
        with client.websocket_connect("/ws") as ws_a:
            _connect(ws_a)

            ws_a.send_json({"type": "join_room", "roomId": "ws-room-1", "userId": "A"})
            _sync(ws_a)

            ws_b.send_json({"type": "join_room", "roomId": "ws-room-1", "userId": "B"})
            ws_b.send_json({"type": "update_language", "language": "hi"})
            _sync(ws_b)
            assert ws_a.receive_json() == {"type": "user_joined", "userId": "B"}

            ws_a.send_json({"type": "send_message", "roomId": "ws-room-1", "message": "hello", "language": "en"})

            own = ws_a.receive_json()
            assert own["type"] == "message_received"
            assert own["translated"] is False
            assert own["message"]["content"] == "hello"

            received = ws_b.receive_json()
            assert received["type"] == "message_received"
            assert received["translated"] is True
            assert received["message"]["content"] == "नमस्ते"
            assert received["message"]["originalContent"] == "hello"
            assert received["message"]["senderId"] == "A"

            ws_a.send_json({"type": "typing", "roomId": "ws-room-1", "userId": "A"})
            assert ws_b.receive_json() == {"type": "typing_indicator", "userId": "A", "isTyping": True}

        # A closed its socket
        assert ws_b.receive_json() == {"type": "user_left", "userId": "A"}


def test_websocket_send_before_join_reports_error(client):
    with client.websocket_connect("/ws") as ws:
        _connect(ws)
        ws.send_json({"type": "send_message", "roomId": "ws-room-2", "message": "hi", "language": "en"})
        assert ws.receive_json() == {"type": "error", "message": "User session not found"}
        _sync(ws)


def test_websocket_join_without_ids_reports_error(client):
    with client.websocket_connect("/ws") as ws:
        _connect(ws)
        ws.send_json({"type": "join_room", "roomId": "ws-room-3"})
        assert ws.receive_json() == {"type": "error", "message": "roomId and userId are required"}


def test_websocket_bad_frames_do_not_close_connection(client):
    with client.websocket_connect("/ws") as ws:
        _connect(ws)

        ws.send_text("not json")
        assert ws.receive_json() == {"type": "error", "message": "Invalid message format"}

        ws.send_json({"type": "typing", "roomId": "ws-room-4"})
        assert ws.receive_json() == {"type": "error", "message": "Invalid typing payload"}

        ws.send_json({"type": "dance"})
        _sync(ws)


def test_websocket_handler_failure_keeps_connection_serving(client, monkeypatch):
    async def broken_typing(connection_id, room_id, user_id):
        raise RuntimeError("typing backend down")

    monkeypatch.setattr(app.state.relay_engine, "typing", broken_typing)

    with client.websocket_connect("/ws") as ws_b:
        _connect(ws_b)
        with client.websocket_connect("/ws") as ws_a:
            _connect(ws_a)

            ws_a.send_json({"type": "join_room", "roomId": "ws-room-5", "userId": "A"})
            _sync(ws_a)
            ws_b.send_json({"type": "join_room", "roomId": "ws-room-5", "userId": "B"})
            _sync(ws_b)
            assert ws_a.receive_json() == {"type": "user_joined", "userId": "B"}

            ws_a.send_json({"type": "typing", "roomId": "ws-room-5", "userId": "A"})
            _sync(ws_a)

            ws_a.send_json({"type": "send_message", "roomId": "ws-room-5", "message": "still here", "language": "en"})
            received = ws_b.receive_json()
            assert received["type"] == "message_received"
            assert received["message"]["content"] == "still here"
            assert received["message"]["senderId"] == "A"
