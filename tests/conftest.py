"""Shared fixtures: reset process-wide logging toggle and cached settings."""

import pytest

from openai_kit.config import get_settings
from openai_kit.logger import set_debug


@pytest.fixture(autouse=True)
def _reset_globals(monkeypatch):
    for name in (
        "OPENAI_KIT_API_KEY",
        "OPENAI_KIT_PROVIDER",
        "OPENAI_KIT_HOST",
        "OPENAI_KIT_SCHEME",
        "OPENAI_KIT_TIMEOUT",
        "OPENAI_KIT_MODEL",
        "OPENAI_KIT_LOG_REQUESTS",
        "OPENAI_KIT_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    set_debug(True)
    yield
    get_settings.cache_clear()
    set_debug(True)
