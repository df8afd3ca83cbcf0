"""CLI commands."""

from .signs import check, list_signs, suggest
from .translate import translate, glosses

__all__ = [
    "translate",
    "glosses",
    "check",
    "suggest",
    "list_signs",
]
