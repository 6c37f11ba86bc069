from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

ChatRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    role: ChatRole
    content: str


class ChatCompletionRequest(BaseModel):
    """Body of `POST {base_url}/chat/completions`.

    Temperature is not range-checked here; the provider rejects out-of-range values.
    """

    messages: list[ChatMessage]
    model: str
    temperature: float


class _ResponseMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str | None = None


class _ResponseChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: _ResponseMessage


class ChatCompletionResponse(BaseModel):
    """
    Internal schema for validating the provider response.

    Only `choices[*].message.content` is read; everything else is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    choices: list[_ResponseChoice]
