"""
Lexicon Translation Service

Best-effort translation for marketplace chat using a phrase table and
common-word substitution. Each lookup strategy reports its own confidence:

- exact phrase match:        0.9
- reverse table match:       0.8
- common-word substitution:  0.6
- no match (text echoed):    0.3

A 0.3 result is not above the relay threshold, so unmatched text reaches
recipients untranslated.
"""

import json
import logging
import os
import re
from typing import Dict, List, Optional

from mandi_relay.config.constants import (
    SUPPORTED_LANGUAGES,
    CONFIDENCE_EXACT_MATCH,
    CONFIDENCE_REVERSE_MATCH,
    CONFIDENCE_WORD_SUBSTITUTION,
    CONFIDENCE_NO_MATCH,
    CONFIDENCE_FAILED,
)
from mandi_relay.schemas.translation import (
    TranslationRequest,
    TranslationResult,
    SupportedLanguage,
)
from mandi_relay.services.translation.lexicon_data import PHRASE_TABLE, COMMON_WORDS

logger = logging.getLogger(__name__)


def _table_key(from_language: str, to_language: str) -> str:
    return f"{from_language}_{to_language}"


class LexiconTranslationService:
    """Translates text using an in-memory marketplace lexicon."""

    def __init__(
        self,
        translations_file: Optional[str] = None,
        phrase_table: Optional[Dict[str, Dict[str, str]]] = None,
        common_words: Optional[Dict[str, Dict[str, str]]] = None,
    ):
        self._common_words = common_words if common_words is not None else COMMON_WORDS
        if phrase_table is not None:
            self._phrases = phrase_table
        else:
            self._phrases = self._load_phrase_table(translations_file)
        self._word_patterns = {
            key: [
                (re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE), replacement)
                for word, replacement in words.items()
            ]
            for key, words in self._common_words.items()
        }

    def _load_phrase_table(self, path: Optional[str]) -> Dict[str, Dict[str, str]]:
        """Load the phrase table from a JSON file, falling back to the built-in table."""
        if not path:
            return PHRASE_TABLE

        if not os.path.exists(path):
            logger.warning(f"[Lexicon] Translations file not found: {path}, using built-in table")
            return PHRASE_TABLE

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"[Lexicon] Error loading translations from {path}: {e}")
            return PHRASE_TABLE

        if not isinstance(data, dict):
            logger.error(f"[Lexicon] Translations file {path} is not a JSON object")
            return PHRASE_TABLE

        logger.info(f"[Lexicon] Loaded {len(data)} language pairs from {path}")
        return {
            key: {str(k).lower(): str(v) for k, v in table.items()}
            for key, table in data.items()
            if isinstance(table, dict)
        }

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """Translate text, reporting the confidence of the strategy that matched."""
        text = request.text
        try:
            translated_text, confidence = self._lookup(
                text, request.from_language, request.to_language
            )
        except Exception as e:
            logger.error(f"[Lexicon] Translation error: {e}")
            return TranslationResult(
                original_text=text,
                translated_text=text,
                confidence=CONFIDENCE_FAILED,
                from_language=request.from_language,
                to_language=request.to_language,
                error="Translation failed",
            )

        return TranslationResult(
            original_text=text,
            translated_text=translated_text,
            confidence=confidence,
            from_language=request.from_language,
            to_language=request.to_language,
        )

    def _lookup(self, text: str, from_language: str, to_language: str) -> tuple[str, float]:
        needle = text.lower()

        forward = self._phrases.get(_table_key(from_language, to_language), {})
        if needle in forward:
            return forward[needle], CONFIDENCE_EXACT_MATCH

        reverse = self._phrases.get(_table_key(to_language, from_language), {})
        for source_phrase, target_phrase in reverse.items():
            if target_phrase.lower() == needle:
                return source_phrase, CONFIDENCE_REVERSE_MATCH

        substituted = self.translate_common_words(text, from_language, to_language)
        if substituted != text:
            return substituted, CONFIDENCE_WORD_SUBSTITUTION

        return text, CONFIDENCE_NO_MATCH

    def translate_common_words(self, text: str, from_language: str, to_language: str) -> str:
        """Replace known market terms word by word; text without any known term is returned unchanged."""
        patterns = self._word_patterns.get(_table_key(from_language, to_language))
        if not patterns:
            return text

        result = text.lower()
        replaced = 0
        for pattern, replacement in patterns:
            result, count = pattern.subn(replacement, result)
            replaced += count
        return result if replaced else text

    def get_supported_languages(self) -> List[SupportedLanguage]:
        return [
            SupportedLanguage(code=lang["code"], name=lang["name"], native_name=lang["nativeName"])
            for lang in SUPPORTED_LANGUAGES
        ]
