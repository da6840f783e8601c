"""
Session Registry

Tracks the chat session bound to each live connection: who the user is,
which room they most recently joined and which language they read.
"""
from dataclasses import dataclass
from typing import Dict, Optional
import logging

from mandi_relay.config.constants import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)


@dataclass
class UserSession:
    """
    Per-connection chat state.

    Attributes:
        user_id: Caller-supplied identity (trusted as given)
        room_id: Room most recently joined on this connection, None after leaving it
        language: Language the user reads messages in
    """
    user_id: str
    room_id: Optional[str]
    language: str = DEFAULT_LANGUAGE


class SessionRegistry:
    """Maps connection IDs to UserSession objects."""

    def __init__(self):
        self._sessions: Dict[str, UserSession] = {}

    def open(self, connection_id: str, user_id: str, room_id: str) -> UserSession:
        """Create or overwrite the session for a connection, resetting its language."""
        session = UserSession(user_id=user_id, room_id=room_id)
        self._sessions[connection_id] = session
        return session

    def get(self, connection_id: str) -> Optional[UserSession]:
        return self._sessions.get(connection_id)

    def set_language(self, connection_id: str, language: str) -> bool:
        """Update the session language. Returns False when no session exists."""
        session = self._sessions.get(connection_id)
        if session is None:
            return False
        session.language = language
        return True

    def close(self, connection_id: str) -> Optional[UserSession]:
        """Remove and return the session for a connection."""
        return self._sessions.pop(connection_id, None)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, connection_id: str) -> bool:
        return connection_id in self._sessions
