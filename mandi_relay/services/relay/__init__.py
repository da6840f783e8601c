"""
Relay Module

- RelayEngine: join/leave, message fan-out with translation, typing, cleanup
- SessionRegistry / UserSession: per-connection chat state
- RoomRegistry: presence bookkeeping per room
"""
from .engine import RelayEngine
from .exceptions import RelayError, InvalidPayloadError, SessionNotFoundError
from .room_registry import RoomRegistry
from .session_registry import SessionRegistry, UserSession

__all__ = [
    "RelayEngine",
    "RelayError",
    "InvalidPayloadError",
    "SessionNotFoundError",
    "RoomRegistry",
    "SessionRegistry",
    "UserSession",
]
