"""Translation endpoint routes."""

from fastapi import APIRouter, Depends, HTTPException

from islbridge.core.errors import PlaybackError

from ..schemas import (
    BatchTranslateItem,
    BatchTranslateRequest,
    TranslateRequest,
    TranslateResponse,
    ErrorResponse,
)
from ..dependencies import get_translation_service
from ..services import TranslationService


router = APIRouter(prefix="/api", tags=["translation"])


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid playback options"},
    },
)
async def translate_text(
    request: TranslateRequest,
    translation_service: TranslationService = Depends(get_translation_service),
):
    """
    Translate English text to ISL glosses and plan sign playback.

    - **text**: The English text to translate (empty text gives no glosses)
    - **options.speed**: Playback speed, 0.5-2.0 (default: server setting)
    - **options.available_only**: Drop glosses with no sign animation (default: false)

    Returns the glosses, catalog coverage, suggestions for missing signs
    and the playback timeline.
    """
    speed = None
    available_only = False

    if request.options:
        speed = request.options.speed
        available_only = request.options.available_only

    try:
        result = translation_service.translate_text(
            text=request.text,
            speed=speed,
            available_only=available_only,
        )
    except PlaybackError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())

    return TranslateResponse(**result)


@router.post(
    "/translate/batch",
    response_model=list[BatchTranslateItem],
)
async def translate_batch(
    request: BatchTranslateRequest,
    translation_service: TranslationService = Depends(get_translation_service),
):
    """
    Translate up to 50 sentences to bare gloss lists.

    Useful for pre-computing glosses for captions or interim speech results.
    """
    return [BatchTranslateItem(**item) for item in translation_service.translate_batch(request.texts)]
