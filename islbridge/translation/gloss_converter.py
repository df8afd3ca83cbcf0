"""Main translation pipeline: English to ISL gloss conversion.

Combines the grammar rules with the sign catalog to produce ISL gloss
sequences from English text.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .catalog import CatalogReport, SignCatalog, DEFAULT_CATALOG
from .grammar_rules import apply_all_rules


@dataclass
class GlossSequence:
    """Result of translating English to ISL glosses."""
    glosses: list[str] = field(default_factory=list)
    original_text: str = ""
    report: Optional[CatalogReport] = None
    suggestions: dict[str, list[str]] = field(default_factory=dict)  # missing gloss -> alternatives

    def __len__(self) -> int:
        return len(self.glosses)

    def __iter__(self):
        return iter(self.glosses)

    @property
    def is_empty(self) -> bool:
        return not self.glosses

    def to_string(self, separator: str = " ") -> str:
        """Convert gloss sequence to string.

        Args:
            separator: String to join glosses with

        Returns:
            Gloss string (e.g., "i rice eat")
        """
        return separator.join(self.glosses)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "glosses": self.glosses,
            "gloss_string": self.to_string(),
            "original_text": self.original_text,
            "coverage": self.report.coverage if self.report else 1.0,
            "available_signs": self.report.available if self.report else list(self.glosses),
            "missing_signs": self.report.missing if self.report else [],
            "suggestions": self.suggestions,
        }


class GlossConverter:
    """Converts English text to ISL gloss sequences."""

    def __init__(
        self,
        catalog: Optional[SignCatalog] = None,
        available_only: bool = False,
    ):
        """Initialize the converter.

        Args:
            catalog: SignCatalog used for coverage and suggestions
            available_only: Drop glosses that have no sign animation
        """
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self.available_only = available_only

    def translate(self, english: Any) -> GlossSequence:
        """Translate English text to an ISL gloss sequence.

        Never raises for bad input: empty or non-string text gives an
        empty sequence.

        Args:
            english: English utterance, final or interim

        Returns:
            GlossSequence with glosses, catalog report and suggestions
        """
        original = english if isinstance(english, str) else ""
        glosses = apply_all_rules(english)

        report = self.catalog.check(glosses)
        suggestions = {
            gloss: self.catalog.suggest_alternatives(gloss)
            for gloss in report.missing
        }

        if self.available_only:
            glosses = report.available.copy()

        return GlossSequence(
            glosses=glosses,
            original_text=original,
            report=report,
            suggestions=suggestions,
        )

    def translate_batch(self, sentences: list[Any]) -> list[GlossSequence]:
        """Translate multiple sentences.

        Args:
            sentences: List of English sentences

        Returns:
            List of GlossSequence results
        """
        return [self.translate(s) for s in sentences]


def translate(english: Any) -> list[str]:
    """Translate English text to ISL glosses.

    Args:
        english: English text; anything that is not a non-empty string gives []

    Returns:
        Ordered gloss tokens with no duplicates
    """
    return apply_all_rules(english)
