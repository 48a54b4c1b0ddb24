"""Prometheus instruments for the request dispatcher."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_ATTEMPTS = Counter(
    "sleeper_sdk_request_attempts_total",
    "Sleeper API request attempts by outcome status (0 = no response)",
    ["method", "status"],
)
RETRY_COUNTER = Counter("sleeper_sdk_retries_total", "Sleeper API requests scheduled for retry", ["method"])
REQUEST_LATENCY = Histogram("sleeper_sdk_request_latency_seconds", "Sleeper API attempt latency", ["method"])

__all__ = ["REQUEST_ATTEMPTS", "RETRY_COUNTER", "REQUEST_LATENCY"]
