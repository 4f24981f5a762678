"""
Batch translation API relayed to the upstream translation backend.
"""
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import logging

from translate_relay.models.schemas import TranslateRequest, TranslateResponse, ErrorResponse
from translate_relay.utils.translator import TranslationService, translation_service

logger = logging.getLogger(__name__)

router = APIRouter()


def get_translation_service() -> TranslationService:
    """Shared translation service; overridden in tests."""
    return translation_service


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/translate",
    response_model=TranslateResponse,
    summary="Translate texts",
    description="Translate a list of strings from source to target language via the upstream backend.",
)
async def translate_texts(
    request: Request,
    service: TranslationService = Depends(get_translation_service),
) -> JSONResponse:
    """Batch translate strings. Items that fail upstream come back as empty strings."""
    try:
        body = await request.json()

        if body is None:
            raise ValueError("Request body is null")
        if not isinstance(body, dict):
            return _error(status.HTTP_400_BAD_REQUEST, "Invalid request")
        try:
            payload = TranslateRequest.model_validate(body)
        except ValidationError as e:
            logger.debug(f"Invalid translate request: {e.errors()}")
            return _error(status.HTTP_400_BAD_REQUEST, "Invalid request")

        if len(payload.texts) > service.max_batch_size:
            return _error(
                status.HTTP_400_BAD_REQUEST,
                f"Too many texts (max {service.max_batch_size})",
            )

        translations = await service.batch_translate(
            payload.texts,
            source=payload.source,
            target=payload.target,
        )
        return JSONResponse(content=TranslateResponse(translations=translations).model_dump())
    except Exception as e:
        logger.error(f"Translate handler error: {e}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
