"""Tests for translation service."""

from unittest.mock import patch

import pytest

from islbridge.api.services.translation_service import TranslationService
from islbridge.core.errors import PlaybackError


class TestTranslationService:
    """Tests for TranslationService class."""

    @pytest.fixture(autouse=True)
    def setup(self, small_catalog):
        self.catalog = small_catalog
        self.service = TranslationService(
            catalog=small_catalog,
            default_speed=1.0,
            idle_clip="idle",
        )

    def test_init_stores_dependencies(self):
        assert self.service.catalog is self.catalog
        assert self.service.default_speed == 1.0
        assert self.service.idle_clip == "idle"

    def test_translate_text_all_available(self):
        result = self.service.translate_text("I eat rice")

        assert result["glosses"] == ["i", "rice", "eat"]
        assert result["gloss_string"] == "i rice eat"
        assert result["coverage"] == 1.0
        assert result["missing_signs"] == []
        assert result["playback"]["total_ms"] == 4500

    def test_translate_text_missing_signs(self):
        result = self.service.translate_text("I eat mangoes")

        assert result["missing_signs"] == ["mangoes"]
        assert result["suggestions"] == {"mangoes": ["mango", "milk"]}
        assert result["playback"]["steps"][1]["clip"] == "idle"

    def test_translate_text_available_only(self):
        result = self.service.translate_text("I eat mangoes", available_only=True)

        assert result["glosses"] == ["i", "eat"]
        assert result["missing_signs"] == ["mangoes"]
        assert len(result["playback"]["steps"]) == 2

    def test_explicit_speed(self):
        result = self.service.translate_text("I eat rice", speed=2.0)

        assert result["playback"]["speed"] == 2.0
        assert result["playback"]["steps"][0]["duration_ms"] == 750

    def test_invalid_speed(self):
        with pytest.raises(PlaybackError):
            self.service.translate_text("I eat rice", speed=3.0)

    def test_custom_idle_clip(self):
        service = TranslationService(catalog=self.catalog, default_speed=1.0, idle_clip="rest")
        result = service.translate_text("I eat mangoes")

        assert result["playback"]["steps"][1]["clip"] == "rest"

    def test_empty_text(self):
        result = self.service.translate_text("")

        assert result["glosses"] == []
        assert result["playback"] == {"speed": 1.0, "total_ms": 0, "steps": []}

    @patch("islbridge.api.services.translation_service.translate")
    def test_translate_batch_calls_translate(self, mock_translate):
        mock_translate.side_effect = lambda text: [text.lower()]

        result = self.service.translate_batch(["Hi", "Bye"])

        assert result == [
            {"text": "Hi", "glosses": ["hi"]},
            {"text": "Bye", "glosses": ["bye"]},
        ]
        assert mock_translate.call_count == 2
