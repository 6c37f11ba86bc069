from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.pumpkinaigc.online/v1"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Provider credentials and endpoint.
    # IMPORTANT: the API key is never logged; an empty key is sent as-is and rejected upstream.
    chatgpt_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("CHATGPT_API_KEY", "OPENAI_API_KEY", "chatgpt_api_key"),
        description="API key used when none is passed explicitly (env lookup is case-insensitive).",
    )
    openai_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        validation_alias=AliasChoices("OPENAI_BASE_URL", "openai_base_url"),
        description="Base URL of the OpenAI-compatible API (override for proxies/emulators).",
    )

    # Request defaults
    openai_model: str = Field(
        default="gpt-4o",
        validation_alias=AliasChoices("OPENAI_MODEL", "openai_model"),
        description="Model identifier used when the caller does not pass one.",
    )
    openai_temperature: float = Field(
        default=0.7,
        validation_alias=AliasChoices("OPENAI_TEMPERATURE", "openai_temperature"),
        description="Sampling temperature used when the caller does not pass one.",
    )
    openai_timeout_seconds: float = Field(
        default=60.0,
        ge=1.0,
        validation_alias=AliasChoices("OPENAI_TIMEOUT_SECONDS", "openai_timeout_seconds"),
        description="Timeout applied to every request made from a provisioned environment.",
    )

    # Runtime environment
    chat_environment: str = Field(
        default="default",
        validation_alias=AliasChoices("CHAT_ENVIRONMENT", "chat_environment"),
        description="Name of the environment used when the caller does not pass one.",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
