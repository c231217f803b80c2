"""Shared fixtures: every test starts from settings read fresh from a clean environment."""

import pytest

from flowcase.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Strip FLOWCASE_* variables and reset the settings cache around each test."""
    import os

    for key in list(os.environ):
        if key.startswith("FLOWCASE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(os.path.dirname(__file__))
    clear_settings_cache()
    yield
    clear_settings_cache()
