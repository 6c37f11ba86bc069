from __future__ import annotations

import pytest

from quickchat.core.llm.environment import close_all_environments
from quickchat.core.settings import get_settings

_SETTINGS_ENV_VARS = (
    "CHATGPT_API_KEY",
    "chatGPT_API_KEY",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_MODEL",
    "OPENAI_TEMPERATURE",
    "OPENAI_TIMEOUT_SECONDS",
    "CHAT_ENVIRONMENT",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    # Keys from the developer's shell must never leak into tests.
    for var in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    # Settings are cached via @lru_cache; clear so each test sees its own env.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _close_environments():
    yield
    close_all_environments()
