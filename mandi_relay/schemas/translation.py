"""
Translation Schemas

Request/result models shared by the translation service, the relay engine
and the REST translation API.
"""

from typing import Optional
from pydantic import Field

from mandi_relay.schemas.websocket_events import CamelModel


class TranslationRequest(CamelModel):
    text: str
    from_language: str
    to_language: str


class TranslationResult(CamelModel):
    """Best-effort translation with a confidence score in [0, 1]."""
    original_text: str
    translated_text: str
    confidence: float = Field(ge=0.0, le=1.0)
    from_language: str
    to_language: str
    error: Optional[str] = None


class TranslateApiRequest(CamelModel):
    """Body of POST /api/translate; fields are validated by the route."""
    text: Optional[str] = None
    from_language: Optional[str] = None
    to_language: Optional[str] = None


class SupportedLanguage(CamelModel):
    code: str
    name: str
    native_name: str
