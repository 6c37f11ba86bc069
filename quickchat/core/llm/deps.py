from __future__ import annotations

from quickchat.core.llm.environment import ChatEnvironment
from quickchat.core.llm.openai_client import OpenAIClient, OpenAIConfig
from quickchat.core.settings import get_settings


def get_openai_client(
    *,
    environment: ChatEnvironment,
    api_key: str | None = None,
    base_url: str | None = None,
) -> OpenAIClient:
    """
    Build an OpenAIClient bound to `environment`'s HTTP client.

    `None` arguments fall back to settings (CHATGPT_API_KEY / OPENAI_BASE_URL).
    Nothing is validated here: an empty key still yields a client and the
    provider rejects the request.
    """

    settings = get_settings()
    config = OpenAIConfig(
        api_key=settings.chatgpt_api_key if api_key is None else api_key,
        base_url=settings.openai_base_url if base_url is None else base_url,
    )
    return OpenAIClient(config=config, http=environment.http)
