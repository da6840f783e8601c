"""
Translation API - Text translation for the chat UI

Endpoints for:
- Translating a piece of text between two languages
- Listing supported languages
"""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from mandi_relay.config.constants import CONFIDENCE_SAME_LANGUAGE
from mandi_relay.schemas.translation import (
    TranslateApiRequest,
    TranslationRequest,
    TranslationResult,
)
from mandi_relay.services.translation import LexiconTranslationService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_translator(request: Request) -> LexiconTranslationService:
    return request.app.state.translation_service


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": {"code": code, "message": message}},
    )


@router.post("/translate")
async def translate_text(
    payload: Any = Body(None),
    translator: LexiconTranslationService = Depends(get_translator),
):
    """Translate text between two languages."""
    body = None
    if isinstance(payload, dict):
        try:
            body = TranslateApiRequest.model_validate(payload)
        except ValidationError:
            logger.warning("Rejected malformed translate body")

    if body is None or not body.text or not body.from_language or not body.to_language:
        return _error(
            status.HTTP_400_BAD_REQUEST,
            "INVALID_INPUT",
            "Text, fromLanguage, and toLanguage are required",
        )

    if body.from_language == body.to_language:
        result = TranslationResult(
            original_text=body.text,
            translated_text=body.text,
            confidence=CONFIDENCE_SAME_LANGUAGE,
            from_language=body.from_language,
            to_language=body.to_language,
        )
        return {"success": True, "translation": result.to_wire()}

    try:
        result = await translator.translate(
            TranslationRequest(
                text=body.text,
                from_language=body.from_language,
                to_language=body.to_language,
            )
        )
    except Exception as e:
        logger.error(f"Error translating text: {e}")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "TRANSLATION_FAILED",
            "Failed to translate text",
        )

    return {"success": True, "translation": result.to_wire()}


@router.get("/languages/supported")
async def supported_languages(
    translator: LexiconTranslationService = Depends(get_translator),
):
    """List the languages the translator understands."""
    return {
        "success": True,
        "languages": [lang.to_wire() for lang in translator.get_supported_languages()],
    }
