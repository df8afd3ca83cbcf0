"""Translation service - orchestrates text-to-ISL translation."""

import logging
from typing import Optional

from islbridge.translation import (
    GlossConverter,
    GlossSequence,
    SignCatalog,
    build_playback_plan,
    translate,
)

logger = logging.getLogger(__name__)


class TranslationService:
    """Handles translation from English text to ISL glosses and playback plans."""

    def __init__(
        self,
        catalog: SignCatalog,
        default_speed: float,
        idle_clip: str,
    ):
        self.catalog = catalog
        self.default_speed = default_speed
        self.idle_clip = idle_clip

    def translate_text(
        self,
        text: str,
        speed: Optional[float] = None,
        available_only: bool = False,
    ) -> dict:
        """
        Translate English text to ISL glosses and plan their playback.

        Args:
            text: English text to translate
            speed: Playback speed multiplier; None uses the server default
            available_only: Drop glosses that have no sign animation

        Returns:
            Dictionary with glosses, catalog coverage, suggestions and playback

        Raises:
            PlaybackError: If speed is out of range
        """
        converter = GlossConverter(catalog=self.catalog, available_only=available_only)
        result: GlossSequence = converter.translate(text)

        plan = build_playback_plan(
            result.glosses,
            speed=self.default_speed if speed is None else speed,
            clip_catalog=self.catalog,
            idle_clip=self.idle_clip,
        )
        logger.info(
            "Translated %d chars into %d glosses (%d missing)",
            len(result.original_text),
            len(result.glosses),
            len(result.report.missing),
        )

        response = result.to_dict()
        response["playback"] = plan.to_dict()
        return response

    def translate_batch(self, texts: list[str]) -> list[dict]:
        """
        Translate several sentences to bare gloss lists.

        Returns:
            One {text, glosses} entry per input, in input order
        """
        return [{"text": text, "glosses": translate(text)} for text in texts]
