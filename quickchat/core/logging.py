"""JSON logging for scripts that use quickchat.

Nothing is configured on import; `setup_logging()` is opt-in. Records from this
package carry chat-call metadata (environment, model, outcome, status, duration)
as `extra` fields and never the prompt, the completion or the API key.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
from datetime import UTC, datetime
from typing import Any


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class JsonFormatter(logging.Formatter):
    """Emit JSON logs while safely handling missing `extra` fields.

    A `%(model)s`-style format string would raise KeyError for records without chat
    metadata, such as the ones httpx emits for each request.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            # Chat call metadata (may not exist on all records)
            "environment": getattr(record, "environment", None),
            "model": getattr(record, "model", None),
            "outcome": getattr(record, "outcome", None),
            "status_code": getattr(record, "status_code", None),
            "duration_ms": getattr(record, "duration_ms", None),
            "error": getattr(record, "error", None),
        }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str | None = None) -> None:
    """Configure application logging (JSON to stdout)."""

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": "quickchat.core.logging.JsonFormatter",
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": "ext://sys.stdout",
                }
            },
            "root": {
                "level": (level or LOG_LEVEL).upper(),
                "handlers": ["default"],
            },
        }
    )
