"""Error normalization for Sleeper API failures."""

from __future__ import annotations

from typing import Any, Optional

import httpx

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please slow down your requests."
NOT_FOUND_MESSAGE = "Resource not found."
SERVER_ERROR_MESSAGE = "Sleeper API server error. Please try again later."


class SleeperError(Exception):
    """A failed request, normalized to status, message and raw details.

    ``status`` is 0 when no response was received at all (connection
    failures, timeouts).
    """

    def __init__(self, status: int, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
        self.details = details

    @property
    def retryable(self) -> bool:
        return not (400 <= self.status < 500 and self.status != 429)

    def __repr__(self) -> str:
        return f"SleeperError(status={self.status!r}, message={self.message!r})"


def _response_details(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def classify_error(exc: httpx.HTTPError) -> SleeperError:
    message = str(exc) or "Unknown error"
    response: Optional[httpx.Response] = None
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
    if response is None:
        return SleeperError(status=0, message=message)

    status = response.status_code
    if status == 429:
        message = RATE_LIMIT_MESSAGE
    elif status == 404:
        message = NOT_FOUND_MESSAGE
    elif status >= 500:
        message = SERVER_ERROR_MESSAGE
    return SleeperError(status=status, message=message, details=_response_details(response))


__all__ = [
    "SleeperError",
    "classify_error",
    "RATE_LIMIT_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "SERVER_ERROR_MESSAGE",
]
