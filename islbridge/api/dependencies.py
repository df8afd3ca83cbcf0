"""FastAPI dependency injection for services."""

from functools import lru_cache

from islbridge.core.config import ISLBridgeConfig, get_config
from islbridge.translation import DEFAULT_CATALOG, SignCatalog

from .services import TranslationService, SignService


def get_settings() -> ISLBridgeConfig:
    """Get the application configuration."""
    return get_config()


@lru_cache()
def get_sign_catalog() -> SignCatalog:
    """Get the sign catalog singleton."""
    return DEFAULT_CATALOG


@lru_cache()
def get_sign_service() -> SignService:
    """Get or create the sign service singleton."""
    return SignService(catalog=get_sign_catalog())


@lru_cache()
def get_translation_service() -> TranslationService:
    """Get or create the translation service singleton."""
    config = get_settings()
    return TranslationService(
        catalog=get_sign_catalog(),
        default_speed=config.playback_speed,
        idle_clip=config.idle_clip,
    )
