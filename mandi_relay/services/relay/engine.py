"""
Relay Engine

Orchestrates chat rooms on top of the connection hub:
- Join/leave with presence notices to the other room members
- Message fan-out with per-recipient translation
- Typing indicators with a timed stop notice
- Cleanup when a connection goes away

Every recipient of a message is served by its own asyncio task, so a slow
or failing translation only delays that one recipient. Messages from one
sender may therefore reach a recipient out of send order when translation
latencies differ.
"""
import asyncio
import logging
import time
import uuid
from datetime import datetime, UTC
from typing import List, Optional, Set

from mandi_relay.config.constants import (
    DEFAULT_LANGUAGE,
    TRANSLATION_CONFIDENCE_THRESHOLD,
    TYPING_INDICATOR_TIMEOUT_SEC,
    TRANSLATION_TIMEOUT_SEC,
    ERROR_SESSION_NOT_FOUND,
    ERROR_JOIN_MISSING_FIELDS,
)
from mandi_relay.schemas.translation import TranslationRequest
from mandi_relay.schemas.websocket_events import (
    ChatMessage,
    ErrorPayload,
    MessageReceivedPayload,
    TypingIndicatorPayload,
    UserPresencePayload,
)
from mandi_relay.services.connection import ConnectionHub
from mandi_relay.services.metrics import (
    active_rooms_gauge,
    deliveries,
    messages_relayed,
    translation_latency,
)
from mandi_relay.services.protocols import TranslationProtocol
from .exceptions import InvalidPayloadError, RelayError, SessionNotFoundError
from .room_registry import RoomRegistry
from .session_registry import SessionRegistry, UserSession

logger = logging.getLogger(__name__)


class RelayEngine:
    """
    Handles chat events for every connection of one relay process.

    The engine owns its session and room registries; build one engine per
    application (or per test) and hand it the hub and translator to use.
    """

    def __init__(
        self,
        hub: ConnectionHub,
        translator: TranslationProtocol,
        typing_timeout: float = TYPING_INDICATOR_TIMEOUT_SEC,
        translation_timeout: Optional[float] = TRANSLATION_TIMEOUT_SEC,
        confidence_threshold: float = TRANSLATION_CONFIDENCE_THRESHOLD,
    ):
        self._hub = hub
        self._translator = translator
        self._sessions = SessionRegistry()
        self._rooms = RoomRegistry()
        self._typing_timeout = typing_timeout
        self._translation_timeout = translation_timeout
        self._confidence_threshold = confidence_threshold
        # In-flight deliveries and typing timers
        self._pending: Set[asyncio.Task] = set()

    @property
    def sessions(self) -> SessionRegistry:
        return self._sessions

    @property
    def rooms(self) -> RoomRegistry:
        return self._rooms

    # === Room Membership ===

    async def join_room(self, connection_id: str, room_id: Optional[str], user_id: Optional[str]) -> bool:
        """Subscribe a connection to a room and announce the user to the others."""
        try:
            self._validate_join(room_id, user_id)
        except RelayError as e:
            await self.report_error(connection_id, str(e))
            return False

        if not self._hub.subscribe(connection_id, room_id):
            logger.warning(f"[Relay] Join by {user_id} dropped, connection {connection_id} is gone")
            return False

        logger.info(f"[Relay] User {user_id} joining room {room_id}")

        self._sessions.open(connection_id, user_id, room_id)
        self._rooms.add_member(room_id, user_id)
        active_rooms_gauge.set(self._rooms.room_count())

        await self._hub.emit_to_room(
            room_id,
            "user_joined",
            UserPresencePayload(user_id=user_id).to_wire(),
            exclude=connection_id,
        )
        return True

    async def leave_room(self, connection_id: str, room_id: str, user_id: str) -> None:
        """Unsubscribe a connection from a room and tell the remaining members."""
        logger.info(f"[Relay] User {user_id} leaving room {room_id}")

        self._hub.unsubscribe(connection_id, room_id)
        self._rooms.remove_member(room_id, user_id)
        active_rooms_gauge.set(self._rooms.room_count())

        session = self._sessions.get(connection_id)
        if session is not None and session.room_id == room_id:
            session.room_id = None

        await self._hub.emit_to_room(
            room_id,
            "user_left",
            UserPresencePayload(user_id=user_id).to_wire(),
            exclude=connection_id,
        )

    async def disconnect(self, connection_id: str) -> Optional[UserSession]:
        """Drop the connection's session and leave its current room, if any."""
        session = self._sessions.close(connection_id)
        if session is None:
            return None

        if session.room_id is not None:
            logger.info(f"[Relay] User {session.user_id} disconnected from room {session.room_id}")
            self._hub.unsubscribe(connection_id, session.room_id)
            self._rooms.remove_member(session.room_id, session.user_id)
            active_rooms_gauge.set(self._rooms.room_count())

            await self._hub.emit_to_room(
                session.room_id,
                "user_left",
                UserPresencePayload(user_id=session.user_id).to_wire(),
                exclude=connection_id,
            )
        return session

    # === Messaging ===

    async def send_message(
        self,
        connection_id: str,
        room_id: str,
        content: str,
        language: Optional[str] = None,
    ) -> List[asyncio.Task]:
        """
        Fan a message out to every live connection in the room, sender included.

        Returns:
            One delivery task per recipient; empty when the sender has no session
        """
        try:
            session = self._require_session(connection_id)
        except RelayError as e:
            messages_relayed.labels(status="rejected").inc()
            await self.report_error(connection_id, str(e))
            return []

        message = ChatMessage(
            id=str(uuid.uuid4()),
            room_id=room_id,
            sender_id=session.user_id,
            content=content,
            original_language=language or DEFAULT_LANGUAGE,
            timestamp=datetime.now(UTC),
        )
        messages_relayed.labels(status="accepted").inc()
        logger.info(f"[Relay] Message from {session.user_id} in room {room_id}: {content}")

        tasks = []
        for recipient_id in self._hub.room_connections(room_id):
            recipient = self._sessions.get(recipient_id)
            if recipient is None:
                continue
            task = asyncio.create_task(
                self._deliver(recipient_id, recipient.language, message)
            )
            self._track(task)
            tasks.append(task)
        return tasks

    async def _deliver(self, connection_id: str, target_language: str, message: ChatMessage) -> None:
        outgoing = message
        if target_language and target_language != message.original_language:
            outgoing = await self._translate_for(message, target_language)
        else:
            deliveries.labels(outcome="same_language").inc()

        await self._hub.emit(
            connection_id,
            "message_received",
            MessageReceivedPayload(message=outgoing, translated=outgoing.translated).to_wire(),
        )

    async def _translate_for(self, message: ChatMessage, target_language: str) -> ChatMessage:
        """Return a translated copy of the message, or the message itself on fallback."""
        request = TranslationRequest(
            text=message.content,
            from_language=message.original_language,
            to_language=target_language,
        )
        language_pair = f"{message.original_language}-{target_language}"
        start = time.perf_counter()

        try:
            result = await asyncio.wait_for(
                self._translator.translate(request),
                timeout=self._translation_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"[Relay] Translation {language_pair} timed out for message {message.id}")
            deliveries.labels(outcome="failed").inc()
            return message
        except Exception as e:
            logger.error(f"[Relay] Translation {language_pair} failed for message {message.id}: {e}")
            deliveries.labels(outcome="failed").inc()
            return message
        finally:
            translation_latency.labels(language_pair=language_pair).observe(time.perf_counter() - start)

        if result.confidence > self._confidence_threshold:
            deliveries.labels(outcome="translated").inc()
            return message.model_copy(update={
                "content": result.translated_text,
                "original_content": message.content,
                "translated": True,
                "translation_confidence": result.confidence,
            })

        deliveries.labels(outcome="low_confidence").inc()
        return message

    # === Typing & Preferences ===

    async def typing(self, connection_id: str, room_id: str, user_id: str) -> asyncio.Task:
        """Announce typing to the room and schedule this burst's own stop notice."""
        await self._hub.emit_to_room(
            room_id,
            "typing_indicator",
            TypingIndicatorPayload(user_id=user_id, is_typing=True).to_wire(),
            exclude=connection_id,
        )
        task = asyncio.create_task(self._clear_typing(connection_id, room_id, user_id))
        self._track(task)
        return task

    async def _clear_typing(self, connection_id: str, room_id: str, user_id: str) -> None:
        await asyncio.sleep(self._typing_timeout)
        await self._hub.emit_to_room(
            room_id,
            "typing_indicator",
            TypingIndicatorPayload(user_id=user_id, is_typing=False).to_wire(),
            exclude=connection_id,
        )

    async def update_language(self, connection_id: str, language: str) -> bool:
        if not self._sessions.set_language(connection_id, language):
            return False
        session = self._sessions.get(connection_id)
        logger.info(f"[Relay] Updated language for user {session.user_id} to {language}")
        return True

    # === Errors ===

    async def report_error(self, connection_id: str, message: str) -> bool:
        """Send an error event to the originating connection."""
        logger.warning(f"[Relay] Error for connection {connection_id}: {message}")
        return await self._hub.emit(connection_id, "error", ErrorPayload(message=message).to_wire())

    @staticmethod
    def _validate_join(room_id: Optional[str], user_id: Optional[str]) -> None:
        if not room_id or not room_id.strip() or not user_id or not user_id.strip():
            raise InvalidPayloadError(ERROR_JOIN_MISSING_FIELDS)

    def _require_session(self, connection_id: str) -> UserSession:
        session = self._sessions.get(connection_id)
        if session is None:
            raise SessionNotFoundError(ERROR_SESSION_NOT_FOUND)
        return session

    # === Background Tasks ===

    def _track(self, task: asyncio.Task) -> None:
        self._pending.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"[Relay] Background task failed: {exc!r}")

    def pending_task_count(self) -> int:
        return len(self._pending)

    async def shutdown(self) -> None:
        """Cancel in-flight deliveries and typing timers."""
        tasks = list(self._pending)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info(f"[Relay] Shutdown complete, cancelled {len(tasks)} pending tasks")
