"""ISLBridge API package - REST endpoints for translation and sign lookup."""

from .main import app
from .schemas import (
    TranslateRequest,
    TranslateResponse,
    BatchTranslateRequest,
    SignResponse,
    SignListResponse,
    SuggestionsResponse,
    ErrorResponse,
    HealthResponse,
)
from .services import TranslationService, SignService

__all__ = [
    "app",
    "TranslateRequest",
    "TranslateResponse",
    "BatchTranslateRequest",
    "SignResponse",
    "SignListResponse",
    "SuggestionsResponse",
    "ErrorResponse",
    "HealthResponse",
    "TranslationService",
    "SignService",
]
