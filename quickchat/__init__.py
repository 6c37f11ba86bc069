"""Send one prompt to a hosted chat-completions endpoint and get the reply back."""

from quickchat.chat.service import ChatFailure, ChatResult, ChatSuccess, chatgpt, complete_chat
from quickchat.core.llm.environment import (
    EnvironmentProvisioningError,
    close_all_environments,
    close_environment,
    provision_environment,
)
from quickchat.core.logging import setup_logging

__all__ = [
    "ChatFailure",
    "ChatResult",
    "ChatSuccess",
    "EnvironmentProvisioningError",
    "chatgpt",
    "close_all_environments",
    "close_environment",
    "complete_chat",
    "provision_environment",
    "setup_logging",
]
