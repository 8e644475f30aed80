"""Translate endpoint — forwards article text to the translation provider."""

from fastapi import APIRouter, Depends, HTTPException, status

from blog.application.schemas import TranslateRequest, TranslateResponse
from blog.application.services import TranslationService
from blog.domain.exceptions import TranslationProviderError
from blog.infrastructure.dependencies import get_translation_service

router = APIRouter(tags=["Translation"])


def _client_status(provider_status: int) -> int:
    # a rejected API key is our misconfiguration, not the visitor's
    if provider_status in (401, 403) or not 400 <= provider_status < 600:
        return status.HTTP_502_BAD_GATEWAY
    return provider_status


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    request: TranslateRequest,
    service: TranslationService = Depends(get_translation_service),
) -> TranslateResponse:
    """Translate a string or a list of strings into ``target_language``."""
    try:
        translated = await service.translate(request.text, request.target_language)
    except TranslationProviderError as e:
        raise HTTPException(
            status_code=_client_status(e.status_code),
            detail=f"Translation failed: {e.message}",
        )
    return TranslateResponse(translated_text=translated)
