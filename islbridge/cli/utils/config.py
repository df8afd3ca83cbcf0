"""Configuration and catalog access for the CLI."""

from functools import lru_cache

from islbridge.core.config import ISLBridgeConfig, get_config
from islbridge.translation import DEFAULT_CATALOG, SignCatalog


def get_settings() -> ISLBridgeConfig:
    """Get the application configuration (read from the environment)."""
    return get_config()


@lru_cache
def get_catalog() -> SignCatalog:
    """Get the sign catalog the CLI checks against."""
    return DEFAULT_CATALOG
