"""Shared fixtures for CLI tests."""

import pytest
from typer.testing import CliRunner

from islbridge.core.config import (
    Environment,
    ISLBridgeConfig,
    LogLevel,
)
from islbridge.translation import SignCatalog


@pytest.fixture
def cli_runner():
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def small_catalog():
    """Create a small sign catalog."""
    return SignCatalog(["i", "eat", "rice", "mango", "milk", "brother", "bread"])


@pytest.fixture
def settings():
    """Create a test configuration at normal speed."""
    return ISLBridgeConfig(
        env=Environment.TESTING,
        log_level=LogLevel.WARNING,
        debug=False,
        playback_speed=1.0,
        idle_clip="idle",
        api_host="127.0.0.1",
        api_port=8000,
        cors_origins=("*",),
    )
