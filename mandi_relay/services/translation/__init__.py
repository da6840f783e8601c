"""
Translation Module

- LexiconTranslationService: phrase-table and word-substitution translator
- get_translation_service: process-wide default instance

Usage:
    from mandi_relay.services.translation import get_translation_service
"""

from typing import Optional

from mandi_relay.config.settings import settings
from mandi_relay.services.translation.lexicon import LexiconTranslationService

_translation_service: Optional[LexiconTranslationService] = None


def get_translation_service() -> LexiconTranslationService:
    """Get or create the default translation service."""
    global _translation_service
    if _translation_service is None:
        _translation_service = LexiconTranslationService(
            translations_file=settings.TRANSLATIONS_FILE
        )
    return _translation_service


__all__ = [
    "LexiconTranslationService",
    "get_translation_service",
]
