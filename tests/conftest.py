import sys
import asyncio
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# Add project root (1 level up from tests/) to sys.path so tests can import 'mandi_relay'
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from mandi_relay.schemas.translation import TranslationRequest, TranslationResult
from mandi_relay.services.connection import ConnectionHub
from mandi_relay.services.relay import RelayEngine


class FakeWebSocket:
    """Records every JSON frame the server sends."""

    def __init__(self, fail: bool = False):
        self.sent: List[Dict[str, Any]] = []
        self.fail = fail

    async def send_json(self, data: Dict[str, Any]):
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(data)

    def events(self, event_type: str) -> List[Dict[str, Any]]:
        return [frame for frame in self.sent if frame["type"] == event_type]


class StubTranslator:
    """
    Translation collaborator with scripted behaviour per language pair.

    ``results`` maps (from, to) to (translated_text, confidence); ``errors``
    lists pairs that raise; ``delays`` holds per-pair sleep times.
    """

    def __init__(self):
        self.results: Dict[tuple, tuple] = {}
        self.errors: set = set()
        self.delays: Dict[tuple, float] = {}
        self.calls: List[TranslationRequest] = []

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        self.calls.append(request)
        pair = (request.from_language, request.to_language)

        delay = self.delays.get(pair)
        if delay:
            await asyncio.sleep(delay)

        if pair in self.errors:
            raise RuntimeError(f"translation backend down for {pair}")

        translated, confidence = self.results.get(pair, (request.text, 0.3))
        return TranslationResult(
            original_text=request.text,
            translated_text=translated,
            confidence=confidence,
            from_language=request.from_language,
            to_language=request.to_language,
        )


@pytest.fixture
def hub() -> ConnectionHub:
    return ConnectionHub()


@pytest.fixture
def translator() -> StubTranslator:
    return StubTranslator()


@pytest.fixture
def engine(hub, translator) -> RelayEngine:
    return RelayEngine(hub=hub, translator=translator, typing_timeout=0.05, translation_timeout=1.0)


@pytest.fixture
def connect(hub):
    """Register a fake socket with the hub; returns (connection_id, socket)."""

    def _connect(connection_id: Optional[str] = None, fail: bool = False):
        ws = FakeWebSocket(fail=fail)
        conn = hub.register(ws, connection_id)
        return conn.connection_id, ws

    return _connect
