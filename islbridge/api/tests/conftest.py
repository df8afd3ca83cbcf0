"""
Shared fixtures for API package tests.
"""

from unittest.mock import MagicMock

import pytest

from islbridge.translation import SignCatalog


@pytest.fixture
def small_catalog():
    """Create a small sign catalog."""
    return SignCatalog(["i", "eat", "rice", "mango", "milk", "hello"])


@pytest.fixture
def mock_sign_service():
    """Create mock SignService."""
    service = MagicMock()

    # Default return values
    service.list_signs.return_value = {
        "signs": [],
        "total": 0,
    }
    service.get_sign.return_value = {"gloss": "hello", "available": True}
    service.get_suggestions.return_value = {"gloss": "hello", "suggestions": []}

    return service


@pytest.fixture
def mock_translation_service():
    """Create mock TranslationService."""
    service = MagicMock()

    # Default return values
    service.translate_text.return_value = {
        "glosses": ["i", "rice", "eat"],
        "gloss_string": "i rice eat",
        "original_text": "I eat rice",
        "coverage": 1.0,
        "available_signs": ["i", "rice", "eat"],
        "missing_signs": [],
        "suggestions": {},
        "playback": {"speed": 1.0, "total_ms": 0, "steps": []},
    }
    service.translate_batch.return_value = []

    return service
