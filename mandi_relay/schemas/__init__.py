"""
Schemas Package

Pydantic models for the WebSocket protocol and the translation API.
"""

from mandi_relay.schemas.websocket_events import (
    CamelModel,
    WebSocketEventBase,
    JoinRoomEvent,
    SendMessageEvent,
    TypingEvent,
    UpdateLanguageEvent,
    LeaveRoomEvent,
    PingEvent,
    INBOUND_EVENTS,
    ChatMessage,
    UserPresencePayload,
    MessageReceivedPayload,
    TypingIndicatorPayload,
    ErrorPayload,
)
from mandi_relay.schemas.translation import (
    TranslationRequest,
    TranslationResult,
    TranslateApiRequest,
    SupportedLanguage,
)

__all__ = [
    "CamelModel",
    "WebSocketEventBase",
    "JoinRoomEvent",
    "SendMessageEvent",
    "TypingEvent",
    "UpdateLanguageEvent",
    "LeaveRoomEvent",
    "PingEvent",
    "INBOUND_EVENTS",
    "ChatMessage",
    "UserPresencePayload",
    "MessageReceivedPayload",
    "TypingIndicatorPayload",
    "ErrorPayload",
    "TranslationRequest",
    "TranslationResult",
    "TranslateApiRequest",
    "SupportedLanguage",
]
