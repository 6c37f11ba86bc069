from __future__ import annotations

import re
import time

from prometheus_client import Counter, Histogram

# IMPORTANT: never put prompts, keys or base URLs in metric labels.
# `model` is caller-supplied and not bounded; odd-looking identifiers collapse to "other".
# `outcome` is always one of success|request_error|environment_error.

_SAFE_MODEL_LABEL = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._:/-]{0,63}$")

chat_completion_requests_total = Counter(
    "chat_completion_requests_total",
    "Total chat completion calls",
    labelnames=("model", "outcome"),
)

chat_completion_request_duration_seconds = Histogram(
    "chat_completion_request_duration_seconds",
    "Chat completion call duration in seconds",
    labelnames=("model", "outcome"),
    # Completions are slow compared to typical API calls
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0, 120.0),
)


def model_label(model: object) -> str:
    if isinstance(model, str) and _SAFE_MODEL_LABEL.fullmatch(model):
        return model
    return "other"


def observe_chat_call(*, model: str, outcome: str, started: float) -> float:
    """Record one chat call and return its duration in milliseconds."""

    duration = time.perf_counter() - started
    label = model_label(model)
    chat_completion_requests_total.labels(model=label, outcome=outcome).inc()
    chat_completion_request_duration_seconds.labels(model=label, outcome=outcome).observe(
        duration
    )
    return round(duration * 1000.0, 2)
