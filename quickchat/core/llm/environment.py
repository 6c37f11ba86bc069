"""Named, process-wide runtime environments for chat requests.

An environment owns a pooled `httpx.Client` configured with the request timeout
(and, in tests, a mock transport). Provisioning is idempotent: the first call for a
name creates the environment, later calls hand back the same one until it is closed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from quickchat.core.settings import get_settings

logger = logging.getLogger("quickchat.environment")


class EnvironmentProvisioningError(Exception):
    """Raised when a chat environment cannot be created."""


@dataclass(frozen=True)
class ChatEnvironment:
    name: str
    http: httpx.Client

    @property
    def is_closed(self) -> bool:
        return self.http.is_closed

    def close(self) -> None:
        self.http.close()


_environments: dict[str, ChatEnvironment] = {}


def provision_environment(
    name: str,
    *,
    timeout_seconds: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> ChatEnvironment:
    """Return the environment registered under `name`, creating it if needed.

    `timeout_seconds` and `transport` only apply when the environment is created;
    they are ignored for an environment that already exists.
    """

    if not isinstance(name, str) or not name.strip():
        raise EnvironmentProvisioningError("Environment name must be a non-empty string")

    existing = _environments.get(name)
    if existing is not None and not existing.is_closed:
        return existing

    try:
        if timeout_seconds is None:
            timeout_seconds = float(get_settings().openai_timeout_seconds)
        http = httpx.Client(timeout=timeout_seconds, transport=transport)
    except Exception as exc:  # noqa: BLE001 - settings and client construction errors alike
        raise EnvironmentProvisioningError(
            f"Failed to provision environment '{name}': {exc}"
        ) from exc

    environment = ChatEnvironment(name=name, http=http)
    _environments[name] = environment
    logger.info("Chat environment provisioned", extra={"environment": name})
    return environment


def close_environment(name: str) -> bool:
    """Close and unregister an environment. Returns False if it was not registered."""

    environment = _environments.pop(name, None)
    if environment is None:
        return False
    environment.close()
    return True


def close_all_environments() -> None:
    for name in list(_environments):
        close_environment(name)


def list_environments() -> list[str]:
    return sorted(_environments)
