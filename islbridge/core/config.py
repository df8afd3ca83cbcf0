"""Environment configuration for ISLBridge.

Provides centralized configuration with sensible defaults.
All configuration is loaded from environment variables.

Usage:
    from islbridge.core import get_config

    config = get_config()
    print(f"Environment: {config.env}")
    print(f"Playback speed: {config.playback_speed}x")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from .errors import InvalidConfigError

# Playback speed bounds, shared with the playback planner
MIN_PLAYBACK_SPEED = 0.5
MAX_PLAYBACK_SPEED = 2.0
DEFAULT_PLAYBACK_SPEED = 0.7
DEFAULT_IDLE_CLIP = "idle"


class Environment(Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class ISLBridgeConfig:
    """Application configuration.

    Immutable configuration object created from environment variables.

    Attributes:
        env: Current environment (development/production/testing)
        log_level: Logging level
        debug: Debug mode enabled
        playback_speed: Default sign playback speed multiplier
        idle_clip: Clip name played when a gloss has no animation
        api_host: API server host
        api_port: API server port
        cors_origins: Allowed CORS origins
    """

    # Environment
    env: Environment
    log_level: LogLevel
    debug: bool

    # Playback settings
    playback_speed: float
    idle_clip: str

    # API settings
    api_host: str
    api_port: int
    cors_origins: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate playback settings."""
        if not MIN_PLAYBACK_SPEED <= self.playback_speed <= MAX_PLAYBACK_SPEED:
            raise InvalidConfigError(
                "playback_speed",
                str(self.playback_speed),
                f"must be between {MIN_PLAYBACK_SPEED} and {MAX_PLAYBACK_SPEED}",
            )
        if not self.idle_clip.strip():
            raise InvalidConfigError("idle_clip", self.idle_clip, "must not be empty")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.env == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.env == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.env == Environment.TESTING


_TRUTHY = ("1", "true", "yes")


def _env_choice(var: str, enum_cls: type[Enum], default: Enum, transform=str.lower) -> Enum:
    """Read an enum member by value; unknown values fall back to the default."""
    raw = transform(os.environ.get(var, default.value))
    for member in enum_cls:
        if member.value == raw:
            return member
    return default


def _env_number(var: str, default, cast, expected: str):
    """Read a number from the environment, raising on malformed values."""
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        raise InvalidConfigError(var, raw, f"expected {expected}") from None


@lru_cache(maxsize=1)
def get_config() -> ISLBridgeConfig:
    """Get the application configuration (singleton).

    Configuration is loaded from environment variables:
    - ISLBRIDGE_ENV: Environment (development/production/testing)
    - ISLBRIDGE_LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR)
    - ISLBRIDGE_DEBUG: Enable debug mode (1/true/yes)
    - ISLBRIDGE_PLAYBACK_SPEED: Default playback speed (0.5-2.0, default: 0.7)
    - ISLBRIDGE_IDLE_CLIP: Fallback animation clip (default: idle)
    - API_HOST: API server host (default: 0.0.0.0)
    - API_PORT: API server port (default: 8000)
    - API_CORS_ORIGINS: Comma-separated CORS origins (default: *)

    Returns:
        Immutable ISLBridgeConfig instance

    Raises:
        InvalidConfigError: If a numeric setting cannot be parsed or is out of range
    """
    env = _env_choice("ISLBRIDGE_ENV", Environment, Environment.DEVELOPMENT)
    log_level = _env_choice("ISLBRIDGE_LOG_LEVEL", LogLevel, LogLevel.INFO, transform=str.upper)
    debug = (
        os.environ.get("ISLBRIDGE_DEBUG", "").lower() in _TRUTHY
        or env is Environment.DEVELOPMENT
    )

    playback_speed = _env_number(
        "ISLBRIDGE_PLAYBACK_SPEED", DEFAULT_PLAYBACK_SPEED, float, "a number"
    )
    idle_clip = os.environ.get("ISLBRIDGE_IDLE_CLIP", DEFAULT_IDLE_CLIP).strip().lower()

    api_host = os.environ.get("API_HOST", "0.0.0.0")
    api_port = _env_number("API_PORT", 8000, int, "an integer")
    cors_origins = tuple(
        origin.strip()
        for origin in os.environ.get("API_CORS_ORIGINS", "*").split(",")
        if origin.strip()
    )

    return ISLBridgeConfig(
        env=env,
        log_level=log_level,
        debug=debug,
        playback_speed=playback_speed,
        idle_clip=idle_clip,
        api_host=api_host,
        api_port=api_port,
        cors_origins=cors_origins,
    )


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing when environment variables change
    between test cases.
    """
    get_config.cache_clear()
