from __future__ import annotations

import pytest

from quickchat.core.llm.deps import get_openai_client
from quickchat.core.llm.environment import provision_environment
from quickchat.core.settings import DEFAULT_BASE_URL


def test_explicit_arguments_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("chatGPT_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_BASE_URL", "https://env.example/v1")
    env = provision_environment("deps")

    client = get_openai_client(environment=env, api_key="sk-arg", base_url="https://arg.example/v1")

    assert client.config.api_key == "sk-arg"
    assert client.config.base_url == "https://arg.example/v1"


def test_falls_back_to_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("chatGPT_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_BASE_URL", "https://env.example/v1")
    env = provision_environment("deps")

    client = get_openai_client(environment=env)

    assert client.config.api_key == "sk-env"
    assert client.config.base_url == "https://env.example/v1"


def test_openai_api_key_is_a_secondary_alias(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-openai")
    env = provision_environment("deps")

    assert get_openai_client(environment=env).config.api_key == "sk-openai"


def test_missing_key_is_not_validated_locally() -> None:
    env = provision_environment("deps")

    client = get_openai_client(environment=env)

    assert client.config.api_key == ""
    assert client.config.base_url == DEFAULT_BASE_URL


def test_explicit_empty_key_is_kept(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("chatGPT_API_KEY", "sk-env")
    env = provision_environment("deps")

    assert get_openai_client(environment=env, api_key="").config.api_key == ""
