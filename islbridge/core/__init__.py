"""Core package - shared utilities, configuration and errors.

This package provides common functionality used across all ISLBridge packages:
- Configuration management
- Logging setup
- Protocol interfaces
- Custom exceptions
- Utility functions

Example usage:
    from islbridge.core import get_config, GlossNotFoundError

    config = get_config()
    print(f"Idle clip: {config.idle_clip}")

    if not available:
        raise GlossNotFoundError("rice", suggestions=["red", "read"])
"""

# Configuration
from .config import (
    DEFAULT_IDLE_CLIP,
    DEFAULT_PLAYBACK_SPEED,
    MAX_PLAYBACK_SPEED,
    MIN_PLAYBACK_SPEED,
    Environment,
    ISLBridgeConfig,
    LogLevel,
    clear_config_cache,
    get_config,
)

# Logging
from .log import configure_logging

# Protocols
from .protocols import ClipCatalog

# Errors
from .errors import (
    ConfigurationError,
    GlossNotFoundError,
    InvalidConfigError,
    ISLBridgeError,
    PlaybackError,
    TranslationError,
)

# Utilities
from .utils import (
    format_duration,
    is_valid_gloss,
    normalize_gloss,
)

__all__ = [
    # Config
    "Environment",
    "LogLevel",
    "ISLBridgeConfig",
    "get_config",
    "clear_config_cache",
    "MIN_PLAYBACK_SPEED",
    "MAX_PLAYBACK_SPEED",
    "DEFAULT_PLAYBACK_SPEED",
    "DEFAULT_IDLE_CLIP",
    # Logging
    "configure_logging",
    # Protocols
    "ClipCatalog",
    # Errors
    "ISLBridgeError",
    "ConfigurationError",
    "InvalidConfigError",
    "TranslationError",
    "GlossNotFoundError",
    "PlaybackError",
    # Utils
    "normalize_gloss",
    "is_valid_gloss",
    "format_duration",
]
