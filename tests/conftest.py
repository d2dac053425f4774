"""Shared test fixtures for the response-kit test suite."""

from __future__ import annotations

import os

import pytest

from response_kit.config.settings import ResponseKitSettings


# ---------------------------------------------------------------------------
# Keep ResponseKitSettings independent of the developer's environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any RESPONSE_KIT_* variables so settings use their defaults."""
    for key in list(os.environ):
        if key.startswith("RESPONSE_KIT_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> ResponseKitSettings:
    """Test settings with safe defaults."""
    return ResponseKitSettings(log_level="DEBUG")

