"""
Protocol definitions for collaborator services.

This module defines interfaces (Python Protocols) that allow:
- Swapping implementations (e.g., lexicon → cloud translation API)
- Testing without a real translation backend
- Clear contracts between the relay engine and its collaborators

Usage:
    from mandi_relay.services.protocols import TranslationProtocol

    async def relay(translator: TranslationProtocol, text: str):
        result = await translator.translate(
            TranslationRequest(text=text, from_language="en", to_language="hi")
        )
"""

from typing import Protocol

from mandi_relay.schemas.translation import TranslationRequest, TranslationResult


class TranslationProtocol(Protocol):
    """
    Interface for translation services.

    Implementations return a best-effort result with a confidence score.
    Callers must tolerate raised exceptions; the relay treats them as a
    zero-confidence result.
    """

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate text from source to target language.

        Args:
            request: Text plus source and target language codes

        Returns:
            TranslationResult with translated text and confidence in [0, 1]
        """
        ...
