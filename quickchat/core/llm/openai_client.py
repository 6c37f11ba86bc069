from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from quickchat.chat.schemas import ChatCompletionRequest, ChatCompletionResponse, ChatMessage


class OpenAIError(Exception):
    """Base error for OpenAI client failures."""


class OpenAIUpstreamError(OpenAIError):
    """Raised when the OpenAI API cannot be reached or returns a non-200 status."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenAIResponseError(OpenAIUpstreamError):
    """Raised when the OpenAI API answers 200 with an unusable body."""


@dataclass(frozen=True)
class OpenAIConfig:
    api_key: str
    base_url: str


class OpenAIClient:
    """
    Minimal synchronous client for the OpenAI chat-completions endpoint.

    Design notes:
    - No logging in this module (prompts/outputs stay out of logs).
    - The HTTP client is borrowed from a provisioned environment and never closed here.
    - No retries; one POST per call.
    """

    def __init__(self, *, config: OpenAIConfig, http: httpx.Client):
        self._config = config
        self._http = http

    @property
    def config(self) -> OpenAIConfig:
        return self._config

    def create_chat_completion(
        self, *, messages: list[ChatMessage], model: str, temperature: float
    ) -> str:
        url = f"{self._config.base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }
        payload: dict[str, Any] = ChatCompletionRequest(
            messages=messages, model=model, temperature=temperature
        ).model_dump()

        try:
            resp = self._http.post(url, headers=headers, json=payload)
        except httpx.TimeoutException as exc:
            raise OpenAIUpstreamError("LLM request timed out") from exc
        except httpx.HTTPError as exc:
            raise OpenAIUpstreamError(f"LLM request failed: {exc}") from exc

        if resp.status_code != 200:
            raise OpenAIUpstreamError(
                f"LLM service returned HTTP {resp.status_code}", status_code=resp.status_code
            )

        try:
            parsed = ChatCompletionResponse.model_validate(resp.json())
        except ValueError as exc:
            # Covers both JSON decoding and pydantic validation errors.
            raise OpenAIResponseError(
                "LLM response was not a valid chat completion", status_code=resp.status_code
            ) from exc

        if not parsed.choices:
            raise OpenAIResponseError("LLM response contained no choices", status_code=200)

        content = parsed.choices[0].message.content
        if content is None:
            raise OpenAIResponseError("LLM response contained no message content", status_code=200)

        return content
