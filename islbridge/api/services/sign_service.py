"""Sign service - answers catalog queries."""

from islbridge.core.errors import GlossNotFoundError
from islbridge.core.utils import normalize_gloss
from islbridge.translation import SignCatalog


class SignService:
    """Handles sign catalog lookups and suggestions."""

    def __init__(self, catalog: SignCatalog):
        self.catalog = catalog

    def list_signs(
        self,
        prefix: str = "",
        limit: int = 50,
        offset: int = 0,
    ) -> dict:
        """
        List catalog signs with optional prefix filtering.

        Args:
            prefix: Only signs starting with this prefix
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            Dictionary with signs list and total count
        """
        matches = self.catalog.search(prefix)
        return {
            "signs": matches[offset:offset + limit],
            "total": len(matches),
        }

    def get_sign(self, gloss: str) -> dict:
        """
        Get a single sign by gloss.

        Raises:
            GlossNotFoundError: If the catalog has no sign for the gloss
        """
        normalized = normalize_gloss(gloss)
        if not self.catalog.has_sign(normalized):
            raise GlossNotFoundError(
                normalized,
                suggestions=self.catalog.suggest_alternatives(normalized),
            )
        return {"gloss": normalized, "available": True}

    def get_suggestions(self, gloss: str) -> dict:
        """Get up to three alternative signs for a gloss."""
        normalized = normalize_gloss(gloss)
        return {
            "gloss": normalized,
            "suggestions": self.catalog.suggest_alternatives(normalized),
        }
