"""Business logic services for the API."""

from .translation_service import TranslationService
from .sign_service import SignService

__all__ = ["TranslationService", "SignService"]
