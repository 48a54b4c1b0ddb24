"""Configuration objects for the Sleeper Python SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict

from . import __version__

DEFAULT_BASE_URL = "https://api.sleeper.app/v1"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    max_retries: int = 3
    retry_delay: float = 1.0
    # 1000 requests per minute ceiling, 60s / 1000 = 60ms
    min_request_interval: float = 0.06
    user_agent: str = f"sleeper-sdk-python/{__version__}"
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.retry_delay < 0:
            raise ValueError("retry_delay must be >= 0")
        if self.min_request_interval < 0:
            raise ValueError("min_request_interval must be >= 0")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls(
            base_url=os.environ.get("SLEEPER_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.environ.get("SLEEPER_TIMEOUT", "10.0")),
            max_retries=int(os.environ.get("SLEEPER_MAX_RETRIES", "3")),
            retry_delay=float(os.environ.get("SLEEPER_RETRY_DELAY", "1.0")),
            min_request_interval=float(os.environ.get("SLEEPER_MIN_REQUEST_INTERVAL", "0.06")),
        )


__all__ = ["ClientConfig", "DEFAULT_BASE_URL"]
