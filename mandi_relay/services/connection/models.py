"""
Connection Models

Data classes representing WebSocket connections.
"""
from datetime import datetime, UTC
from typing import Dict, Any
import logging
import uuid

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class ClientConnection:
    """Represents a single live WebSocket connection."""

    def __init__(self, websocket: WebSocket, connection_id: str | None = None):
        self.websocket = websocket
        self.connection_id = connection_id or uuid.uuid4().hex
        self.connected_at = datetime.now(UTC)

    async def send_event(self, event_type: str, payload: Dict[str, Any]) -> bool:
        """Send a typed JSON event to this connection."""
        try:
            await self.websocket.send_json({"type": event_type, **payload})
            return True
        except Exception as e:
            logger.error(f"Error sending {event_type} to {self.connection_id}: {e}")
            return False
