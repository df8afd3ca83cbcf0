"""CLI utilities."""

from .config import get_catalog, get_settings
from .display import console, print_playback_table, print_sign_table, print_translation

__all__ = [
    "get_catalog",
    "get_settings",
    "console",
    "print_translation",
    "print_playback_table",
    "print_sign_table",
]
