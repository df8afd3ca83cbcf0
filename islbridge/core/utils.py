"""Common utility functions for ISLBridge.

Provides helper functions used across multiple packages.
"""

from __future__ import annotations

import re
from typing import Any

_VALID_GLOSS = re.compile(r"^[a-z0-9]+$")


# ============ String Utilities ============


def normalize_gloss(gloss: Any) -> str:
    """Normalize a gloss to canonical form.

    - Converts to lowercase
    - Removes leading/trailing whitespace
    - Returns an empty string for non-string input

    Args:
        gloss: The gloss to normalize

    Returns:
        Normalized gloss string

    Examples:
        >>> normalize_gloss("Hello ")
        'hello'
        >>> normalize_gloss(None)
        ''
    """
    if not isinstance(gloss, str):
        return ""
    return gloss.strip().lower()


def is_valid_gloss(gloss: Any) -> bool:
    """Check if gloss is a valid gloss token.

    Valid glosses are non-empty and contain only letters and digits
    after normalization.

    Args:
        gloss: Gloss to validate

    Returns:
        True if valid
    """
    normalized = normalize_gloss(gloss)
    if not normalized:
        return False
    return bool(_VALID_GLOSS.match(normalized))


# ============ Time Utilities ============


def format_duration(ms: int) -> str:
    """Format milliseconds as human-readable duration.

    Args:
        ms: Duration in milliseconds

    Returns:
        Formatted string (e.g., "1.5s", "2m 30s")
    """
    seconds = ms / 1000
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds // 60)
    remaining_seconds = seconds % 60
    return f"{minutes}m {remaining_seconds:.0f}s"
