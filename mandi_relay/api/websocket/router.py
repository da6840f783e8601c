"""
WebSocket Router - Real-time Chat Endpoint

This is the thin routing layer that delegates to ChatOrchestrator
for all WebSocket session management.
"""
from fastapi import APIRouter, WebSocket

from mandi_relay.services.session import ChatOrchestrator

router = APIRouter()


@router.websocket("/ws")
async def ws_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for multilingual room chat.

    Every frame is a JSON object with a ``type`` key.

    Inbound Types:
        - join_room {roomId, userId}
        - send_message {roomId, message, language}
        - typing {roomId, userId}
        - update_language {language}
        - leave_room {roomId, userId}
        - ping

    Outbound Types:
        - connected {connectionId}
        - user_joined / user_left {userId}
        - message_received {message, translated}
        - typing_indicator {userId, isTyping}
        - error {message}
        - pong
    """
    orchestrator = ChatOrchestrator(
        engine=websocket.app.state.relay_engine,
        hub=websocket.app.state.connection_hub,
    )
    await orchestrator.handle_connection(websocket)
