import json
import logging

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from mandi_relay.config.constants import ERROR_INVALID_FORMAT
from mandi_relay.schemas.websocket_events import (
    INBOUND_EVENTS,
    WebSocketEventBase,
)
from mandi_relay.services.connection import ConnectionHub
from mandi_relay.services.metrics import active_connections_gauge
from mandi_relay.services.relay import RelayEngine

logger = logging.getLogger(__name__)


class ChatOrchestrator:
    """
    Orchestrates the lifecycle of one chat WebSocket.
    Handles:
    - Connection registration with the hub
    - Message loop processing (JSON events)
    - Per-event isolation so one bad event cannot end the loop
    - Cleanup on disconnect
    """

    def __init__(self, engine: RelayEngine, hub: ConnectionHub):
        self.engine = engine
        self.hub = hub

    async def handle_connection(self, websocket: WebSocket):
        """
        Main entry point for handling a WebSocket connection.
        """
        await websocket.accept()

        conn = self.hub.register(websocket)
        connection_id = conn.connection_id
        active_connections_gauge.inc()
        logger.info(f"[Orchestrator] User connected: {connection_id}")

        try:
            await conn.send_event("connected", {"connectionId": connection_id})
            await self._message_loop(websocket, connection_id)
        finally:
            await self._cleanup(connection_id)

    async def _message_loop(self, websocket: WebSocket, connection_id: str):
        """
        Main message processing loop.
        """
        try:
            while True:
                message = await websocket.receive()

                if message["type"] == "websocket.disconnect":
                    logger.info(f"[Orchestrator] User disconnected: {connection_id}")
                    break

                if message.get("text") is not None:
                    try:
                        await self._handle_text_message(message["text"], connection_id)
                    except Exception:
                        logger.exception(f"[Orchestrator] Error handling event from {connection_id}")
                elif message.get("bytes") is not None:
                    logger.warning(f"[Orchestrator] Ignoring binary frame from {connection_id}")
                else:
                    logger.warning(f"[Orchestrator] Unexpected message structure from {connection_id}")

        except WebSocketDisconnect:
            logger.info(f"[Orchestrator] User disconnected: {connection_id}")

        except Exception as e:
            logger.error(f"[Orchestrator] Error during message loop: {e}")

    async def _handle_text_message(self, text_data: str, connection_id: str):
        """
        Parse a JSON event and hand it to the relay engine.
        """
        try:
            data = json.loads(text_data)
        except json.JSONDecodeError:
            logger.warning("[Orchestrator] Invalid JSON received")
            await self.engine.report_error(connection_id, ERROR_INVALID_FORMAT)
            return

        if not isinstance(data, dict):
            logger.warning("[Orchestrator] Event is not a JSON object")
            await self.engine.report_error(connection_id, ERROR_INVALID_FORMAT)
            return

        msg_type = data.get("type")
        event_model = INBOUND_EVENTS.get(msg_type)
        if event_model is None:
            logger.warning(f"[Orchestrator] Unknown message type: {msg_type}")
            return

        try:
            event = event_model.model_validate(data)
        except ValidationError as e:
            logger.warning(f"[Orchestrator] Invalid {msg_type} payload from {connection_id}: {e.error_count()} errors")
            await self.engine.report_error(connection_id, f"Invalid {msg_type} payload")
            return

        await self._dispatch(event, connection_id)

    async def _dispatch(self, event: WebSocketEventBase, connection_id: str):
        msg_type = event.type

        if msg_type == "join_room":
            await self.engine.join_room(connection_id, event.room_id, event.user_id)

        elif msg_type == "send_message":
            await self.engine.send_message(connection_id, event.room_id, event.message, event.language)

        elif msg_type == "typing":
            await self.engine.typing(connection_id, event.room_id, event.user_id)

        elif msg_type == "update_language":
            await self.engine.update_language(connection_id, event.language)

        elif msg_type == "leave_room":
            await self.engine.leave_room(connection_id, event.room_id, event.user_id)

        elif msg_type == "ping":
            await self.hub.emit(connection_id, "pong", {})

    async def _cleanup(self, connection_id: str):
        """
        Drop the connection from the hub and let the engine clean up its session.
        """
        self.hub.unregister(connection_id)
        active_connections_gauge.dec()

        try:
            await self.engine.disconnect(connection_id)
        except Exception:
            logger.exception(f"[Orchestrator] Error handling disconnect for {connection_id}")

