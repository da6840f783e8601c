"""
Connection Hub

Transport-level WebSocket management:
- Connection registration/removal
- Room subscriptions (the native broadcast groups)
- Event emission to one connection or a whole room

The hub's subscription sets are the live delivery view. They change the
moment a socket subscribes, unsubscribes or goes away.
"""
from typing import Dict, List, Optional, Set, Any
import logging

from fastapi import WebSocket

from .models import ClientConnection

logger = logging.getLogger(__name__)


class ConnectionHub:
    """
    Manages all live WebSocket connections and their room subscriptions.

    A connection may be subscribed to any number of rooms.
    """

    def __init__(self):
        # connection_id -> ClientConnection
        self._connections: Dict[str, ClientConnection] = {}
        # room_id -> {connection_id}
        self._rooms: Dict[str, Set[str]] = {}
        # connection_id -> {room_id} (for quick cleanup)
        self._subscriptions: Dict[str, Set[str]] = {}

    # === Core Connection Methods ===

    def register(self, websocket: WebSocket, connection_id: Optional[str] = None) -> ClientConnection:
        """Register an accepted WebSocket and return its connection."""
        conn = ClientConnection(websocket, connection_id)
        self._connections[conn.connection_id] = conn
        self._subscriptions[conn.connection_id] = set()
        logger.info(f"[Hub] Connection {conn.connection_id} registered")
        return conn

    def unregister(self, connection_id: str) -> Set[str]:
        """Remove a connection and drop all its subscriptions. Returns the rooms it was in."""
        self._connections.pop(connection_id, None)
        rooms = self._subscriptions.pop(connection_id, set())

        for room_id in rooms:
            members = self._rooms.get(room_id)
            if members is None:
                continue
            members.discard(connection_id)
            if not members:
                del self._rooms[room_id]

        logger.info(f"[Hub] Connection {connection_id} unregistered")
        return rooms

    # === Room Subscriptions ===

    def subscribe(self, connection_id: str, room_id: str) -> bool:
        """Add a connection to a room's broadcast group."""
        if connection_id not in self._connections:
            logger.warning(f"[Hub] Cannot subscribe unknown connection {connection_id} to {room_id}")
            return False

        self._rooms.setdefault(room_id, set()).add(connection_id)
        self._subscriptions[connection_id].add(room_id)
        return True

    def unsubscribe(self, connection_id: str, room_id: str) -> bool:
        """Remove a connection from a room's broadcast group."""
        members = self._rooms.get(room_id)
        if not members or connection_id not in members:
            return False

        members.discard(connection_id)
        if not members:
            del self._rooms[room_id]
        self._subscriptions.get(connection_id, set()).discard(room_id)
        return True

    # === Emission ===

    async def emit(self, connection_id: str, event_type: str, payload: Dict[str, Any]) -> bool:
        """Send an event to a single connection."""
        conn = self._connections.get(connection_id)
        if not conn:
            return False
        return await conn.send_event(event_type, payload)

    async def emit_to_room(
        self,
        room_id: str,
        event_type: str,
        payload: Dict[str, Any],
        exclude: Optional[str] = None
    ) -> int:
        """Send an event to every connection subscribed to a room."""
        sent_count = 0
        for connection_id in self.room_connections(room_id):
            if exclude and connection_id == exclude:
                continue
            if await self.emit(connection_id, event_type, payload):
                sent_count += 1
        return sent_count

    # === Query Methods ===

    def room_connections(self, room_id: str) -> List[str]:
        """Snapshot of connection IDs currently subscribed to a room."""
        return list(self._rooms.get(room_id, ()))

    def rooms_of(self, connection_id: str) -> Set[str]:
        return set(self._subscriptions.get(connection_id, ()))

    def is_connected(self, connection_id: str) -> bool:
        return connection_id in self._connections

    def get_total_connections(self) -> int:
        """Get total number of active connections."""
        return len(self._connections)

    def get_active_room_count(self) -> int:
        """Get number of rooms with at least one subscriber."""
        return len(self._rooms)
