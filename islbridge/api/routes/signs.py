"""Sign catalog endpoint routes."""

from fastapi import APIRouter, Depends, Query

from ..schemas import (
    ErrorResponse,
    SignListResponse,
    SignResponse,
    SuggestionsResponse,
)
from ..dependencies import get_sign_service
from ..services import SignService


router = APIRouter(prefix="/api/signs", tags=["signs"])


@router.get(
    "",
    response_model=SignListResponse,
    summary="List signs",
)
async def list_signs(
    q: str = Query("", max_length=50, description="Gloss prefix"),
    limit: int = Query(50, ge=1, le=200, description="Maximum results"),
    offset: int = Query(0, ge=0, description="Results to skip"),
    sign_service: SignService = Depends(get_sign_service),
):
    """
    List catalog signs in catalog order.

    Use the q parameter to only list glosses starting with a prefix.
    """
    result = sign_service.list_signs(prefix=q, limit=limit, offset=offset)
    return SignListResponse(**result)


@router.get(
    "/{gloss}",
    response_model=SignResponse,
    responses={
        404: {"model": ErrorResponse, "description": "No sign for gloss"},
    },
    summary="Check sign availability",
)
async def get_sign(
    gloss: str,
    sign_service: SignService = Depends(get_sign_service),
):
    """Check whether a gloss has a sign animation (case-insensitive)."""
    return SignResponse(**sign_service.get_sign(gloss))


@router.get(
    "/{gloss}/suggestions",
    response_model=SuggestionsResponse,
    summary="Suggest alternative signs",
)
async def get_suggestions(
    gloss: str,
    sign_service: SignService = Depends(get_sign_service),
):
    """Suggest up to three catalog signs for a gloss, in catalog order."""
    return SuggestionsResponse(**sign_service.get_suggestions(gloss))
