"""Check glosses against the catalog of available sign animations.

Lets a caller find out which glosses can actually be rendered before handing
a sequence to the avatar, and suggests nearby signs for the ones that can't.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

from islbridge.core.utils import is_valid_gloss, normalize_gloss

from .lexicon import AVAILABLE_SIGNS

MAX_SUGGESTIONS = 3


@dataclass
class CatalogReport:
    """Result of checking a gloss sequence against a catalog."""
    available: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    coverage: float = 1.0  # Fraction of glosses that have a sign

    @property
    def is_complete(self) -> bool:
        """True if all glosses are available."""
        return len(self.missing) == 0

    @property
    def is_partial(self) -> bool:
        """True if some but not all glosses are available."""
        return len(self.available) > 0 and len(self.missing) > 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "available": self.available,
            "missing": self.missing,
            "coverage": self.coverage,
        }


class SignCatalog:
    """An ordered, read-only set of glosses that have animation clips."""

    def __init__(self, signs: Optional[Iterable[str]] = None):
        """Initialize the catalog.

        Args:
            signs: Glosses with a known clip. Defaults to AVAILABLE_SIGNS.
                Order is kept (it decides suggestion order); duplicates
                and entries that are not gloss tokens are dropped.
        """
        ordered = []
        seen = set()
        for sign in AVAILABLE_SIGNS if signs is None else signs:
            gloss = normalize_gloss(sign)
            if is_valid_gloss(gloss) and gloss not in seen:
                seen.add(gloss)
                ordered.append(gloss)
        self._signs = tuple(ordered)
        self._lookup = frozenset(seen)

    def __contains__(self, gloss: object) -> bool:
        return self.has_sign(gloss)

    def __iter__(self) -> Iterator[str]:
        return iter(self._signs)

    def __len__(self) -> int:
        return len(self._signs)

    @property
    def signs(self) -> tuple[str, ...]:
        """All glosses in catalog order."""
        return self._signs

    def has_sign(self, gloss: Any) -> bool:
        """Check whether a gloss has an animation (case-insensitive).

        Args:
            gloss: Gloss token

        Returns:
            True if the gloss is in the catalog; False for non-strings
        """
        normalized = normalize_gloss(gloss)
        return bool(normalized) and normalized in self._lookup

    def filter_available(self, glosses: Iterable[str]) -> list[str]:
        """Keep only glosses that have an animation, preserving order.

        Args:
            glosses: Gloss sequence

        Returns:
            Filtered glosses, as given (not re-cased)
        """
        return [g for g in glosses if self.has_sign(g)]

    def suggest_alternatives(self, gloss: Any) -> list[str]:
        """Suggest up to three catalog signs for a gloss that has none.

        A sign matches when it starts with the same letter as the gloss,
        contains the gloss's first two letters, or its own first two letters
        appear in the gloss. Results come in catalog order; there is no
        ranking beyond that.

        Args:
            gloss: Gloss without an animation

        Returns:
            Zero to three suggested glosses
        """
        word = normalize_gloss(gloss)
        if not word:
            return []

        first_letter = word[0]
        prefix = word[:2]
        suggestions = []
        for sign in self._signs:
            if sign[0] == first_letter or prefix in sign or sign[:2] in word:
                suggestions.append(sign)
                if len(suggestions) == MAX_SUGGESTIONS:
                    break
        return suggestions

    def check(self, glosses: Iterable[str]) -> CatalogReport:
        """Split a gloss sequence into available and missing glosses.

        Args:
            glosses: Gloss sequence

        Returns:
            CatalogReport with coverage (1.0 for an empty sequence)
        """
        report = CatalogReport()
        for gloss in glosses:
            if self.has_sign(gloss):
                report.available.append(gloss)
            else:
                report.missing.append(gloss)

        total = len(report.available) + len(report.missing)
        if total > 0:
            report.coverage = len(report.available) / total
        return report

    def search(self, prefix: str = "") -> list[str]:
        """List catalog glosses starting with a prefix, in catalog order."""
        prefix = normalize_gloss(prefix)
        return [s for s in self._signs if s.startswith(prefix)]


DEFAULT_CATALOG = SignCatalog()


def is_sign_available(gloss: Any) -> bool:
    """Check whether a gloss is in the default catalog."""
    return DEFAULT_CATALOG.has_sign(gloss)


def filter_available(glosses: Iterable[str]) -> list[str]:
    """Keep only glosses in the default catalog, preserving order."""
    return DEFAULT_CATALOG.filter_available(glosses)


def suggest_alternatives(gloss: Any) -> list[str]:
    """Suggest up to three default-catalog signs for a gloss."""
    return DEFAULT_CATALOG.suggest_alternatives(gloss)
