"""Custom exception classes for ISLBridge.

Exception Hierarchy:
    ISLBridgeError (base)
    ├── ConfigurationError
    │   └── InvalidConfigError
    └── TranslationError
        ├── GlossNotFoundError
        └── PlaybackError

The gloss pipeline itself never raises: malformed input yields an empty
sequence. These errors belong to the layers around it.
"""

from typing import Any, Optional


class ISLBridgeError(Exception):
    """Base exception for all ISLBridge errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        result: dict[str, Any] = {
            "error": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# ============ Configuration Errors ============


class ConfigurationError(ISLBridgeError):
    """Error in application configuration."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration value could not be parsed or is out of range."""

    def __init__(self, config_key: str, value: str, reason: str):
        super().__init__(
            message=f"Invalid configuration {config_key}={value!r}: {reason}",
            code="invalid_config",
            details={"config_key": config_key, "value": value, "reason": reason},
        )
        self.config_key = config_key


# ============ Translation Errors ============


class TranslationError(ISLBridgeError):
    """Base class for translation-related errors."""

    pass


class GlossNotFoundError(TranslationError):
    """No sign animation is available for a gloss."""

    def __init__(self, gloss: str, suggestions: Optional[list[str]] = None):
        super().__init__(
            message=f"No sign available for gloss '{gloss}'",
            code="gloss_not_found",
            details={"gloss": gloss, "suggestions": suggestions or []},
        )
        self.gloss = gloss
        self.suggestions = suggestions or []


class PlaybackError(TranslationError):
    """Playback plan could not be built."""

    def __init__(self, reason: str, speed: Any = None):
        super().__init__(
            message=f"Cannot build playback plan: {reason}",
            code="playback_error",
            details={"reason": reason, "speed": speed},
        )
        self.speed = speed
