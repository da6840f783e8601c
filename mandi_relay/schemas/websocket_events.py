"""
WebSocket Event Schemas

Pydantic models for the chat relay's JSON event protocol. Every frame is an
object with a ``type`` key; payload keys use camelCase on the wire.
"""

from datetime import datetime
from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from mandi_relay.config.constants import MESSAGE_TYPE_TEXT


class CamelModel(BaseModel):
    """Base model mapping snake_case fields to camelCase wire keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# =============================================================================
# Inbound Events
# =============================================================================

class WebSocketEventBase(CamelModel):
    """Base model for all inbound WebSocket events."""
    type: str


class JoinRoomEvent(WebSocketEventBase):
    """Join a chat room. Missing ids are reported by the relay, not rejected here."""
    type: Literal["join_room"] = "join_room"
    room_id: Optional[str] = None
    user_id: Optional[str] = None


class SendMessageEvent(WebSocketEventBase):
    """Send a text message to a room."""
    type: Literal["send_message"] = "send_message"
    room_id: str
    message: str
    language: Optional[str] = None


class TypingEvent(WebSocketEventBase):
    type: Literal["typing"] = "typing"
    room_id: str
    user_id: str


class UpdateLanguageEvent(WebSocketEventBase):
    type: Literal["update_language"] = "update_language"
    language: str


class LeaveRoomEvent(WebSocketEventBase):
    type: Literal["leave_room"] = "leave_room"
    room_id: str
    user_id: str


class PingEvent(WebSocketEventBase):
    """Simple ping for latency check."""
    type: Literal["ping"] = "ping"


INBOUND_EVENTS: dict[str, type[WebSocketEventBase]] = {
    "join_room": JoinRoomEvent,
    "send_message": SendMessageEvent,
    "typing": TypingEvent,
    "update_language": UpdateLanguageEvent,
    "leave_room": LeaveRoomEvent,
    "ping": PingEvent,
}


# =============================================================================
# Chat Message
# =============================================================================

class ChatMessage(CamelModel):
    """
    A relayed chat message.

    The canonical instance is frozen; per-recipient translations are derived
    with ``model_copy(update=...)`` so the original is never mutated.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
    room_id: str
    sender_id: str
    content: str
    original_language: str
    timestamp: datetime
    message_type: str = MESSAGE_TYPE_TEXT
    translated: bool = False
    original_content: Optional[str] = None
    translation_confidence: Optional[float] = None


# =============================================================================
# Outbound Events
# =============================================================================

class UserPresencePayload(CamelModel):
    """Payload of user_joined / user_left."""
    user_id: str


class MessageReceivedPayload(CamelModel):
    message: ChatMessage
    translated: bool


class TypingIndicatorPayload(CamelModel):
    user_id: str
    is_typing: bool


class ErrorPayload(CamelModel):
    message: str
