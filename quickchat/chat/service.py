from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Literal

from quickchat.chat.schemas import ChatMessage
from quickchat.core.llm.deps import get_openai_client
from quickchat.core.llm.environment import EnvironmentProvisioningError, provision_environment
from quickchat.core.metrics import observe_chat_call
from quickchat.core.settings import get_settings

logger = logging.getLogger("quickchat.chat")

FailureStage = Literal["environment", "request"]


@dataclass(frozen=True)
class ChatSuccess:
    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ChatFailure:
    reason: str
    stage: FailureStage
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return False


ChatResult = ChatSuccess | ChatFailure


def complete_chat(
    prompt: str,
    *,
    model: str | None = None,
    temperature: float | None = None,
    env_name: str | None = None,
    api_key: str | None = None,
    base_url: str | None = None,
) -> ChatResult:
    """Send `prompt` as a single user message and return the first choice's text.

    Never raises: provisioning problems come back as
    `ChatFailure(stage="environment")`, anything that goes wrong while building the
    client or talking to the provider as `ChatFailure(stage="request")`.
    """

    started = time.perf_counter()
    # Resolved up front so metric labels are stable even if settings fail to load.
    resolved_model = model or "unknown"
    resolved_env_name = env_name

    try:
        settings = get_settings()
        resolved_model = settings.openai_model if model is None else model
        resolved_env_name = settings.chat_environment if env_name is None else env_name
        environment = provision_environment(resolved_env_name)
    except Exception as exc:  # noqa: BLE001 - settings loading (.env, env vars) included
        if not isinstance(exc, EnvironmentProvisioningError):
            exc = EnvironmentProvisioningError(f"Failed to load settings: {exc}")
        duration_ms = observe_chat_call(
            model=resolved_model, outcome="environment_error", started=started
        )
        logger.error(
            "Error provisioning chat environment: %s",
            exc,
            extra={
                "environment": resolved_env_name,
                "model": resolved_model,
                "outcome": "environment_error",
                "duration_ms": duration_ms,
                "error": type(exc).__name__,
            },
        )
        return ChatFailure(reason=str(exc), stage="environment")

    resolved_temperature = settings.openai_temperature if temperature is None else temperature

    try:
        client = get_openai_client(environment=environment, api_key=api_key, base_url=base_url)
        messages = [ChatMessage(role="user", content=prompt)]
        text = client.create_chat_completion(
            messages=messages, model=resolved_model, temperature=resolved_temperature
        )
    except Exception as exc:  # noqa: BLE001 - callers get a failure value, never an exception
        status_code = getattr(exc, "status_code", None)
        duration_ms = observe_chat_call(
            model=resolved_model, outcome="request_error", started=started
        )
        logger.error(
            "Error during API call: %s",
            exc,
            extra={
                "environment": environment.name,
                "model": resolved_model,
                "outcome": "request_error",
                "status_code": status_code,
                "duration_ms": duration_ms,
                "error": type(exc).__name__,
            },
        )
        return ChatFailure(reason=str(exc), stage="request", status_code=status_code)

    duration_ms = observe_chat_call(model=resolved_model, outcome="success", started=started)
    logger.debug(
        "Chat completion succeeded",
        extra={
            "environment": environment.name,
            "model": resolved_model,
            "outcome": "success",
            "status_code": 200,
            "duration_ms": duration_ms,
        },
    )
    return ChatSuccess(text=text)


def chatgpt(
    content: str,
    model: str | None = None,
    temperature: float | None = None,
    env_name: str | None = None,
    api_key: str | None = None,
    base_url: str | None = None,
) -> str | None:
    """Ask the model one question and return its answer, or None if anything failed.

    Args:
        content: The prompt sent as a single user message.
        model: Model identifier (default `gpt-4o`, or OPENAI_MODEL).
        temperature: Sampling temperature, usually in [0, 1] (default 0.7).
        env_name: Name of the runtime environment to provision or reuse.
        api_key: API key; falls back to the chatGPT_API_KEY environment variable.
        base_url: API base URL; falls back to OPENAI_BASE_URL or the default endpoint.
    """

    result = complete_chat(
        content,
        model=model,
        temperature=temperature,
        env_name=env_name,
        api_key=api_key,
        base_url=base_url,
    )
    if isinstance(result, ChatSuccess):
        return result.text
    return None
