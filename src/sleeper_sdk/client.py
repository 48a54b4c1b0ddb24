"""Paced, retrying HTTP dispatcher for the Sleeper API."""

from __future__ import annotations

import asyncio
import logging
import time
from functools import lru_cache
from typing import Any, Dict, Literal, Mapping, Optional, TypeVar, Union, overload
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter

from .config import ClientConfig
from .errors import SleeperError, classify_error
from .metrics import REQUEST_ATTEMPTS, REQUEST_LATENCY, RETRY_COUNTER
from .pacing import RequestPacer

logger = logging.getLogger("sleeper_sdk.http")

T = TypeVar("T")
Method = Literal["GET", "POST", "PUT", "DELETE"]
QueryValue = Union[str, int, float, bool, None]

# encodeURIComponent leaves these unescaped
_UNRESERVED = "-_.!~*'()"


def _encode(value: Any) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe=_UNRESERVED)


def build_query_string(params: Mapping[str, QueryValue]) -> str:
    """Serialize ``params`` into ``?k=v&...``, skipping ``None`` values."""
    pairs = [f"{_encode(key)}={_encode(value)}" for key, value in params.items() if value is not None]
    return f"?{'&'.join(pairs)}" if pairs else ""


@lru_cache(maxsize=None)
def _adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


class HttpClient:
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._pacer = RequestPacer(self._config.min_request_interval)
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            headers=self._headers(),
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def pacer(self) -> RequestPacer:
        return self._pacer

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self._config.user_agent,
        }
        headers.update(self._config.headers)
        return headers

    async def _send(self, method: str, path: str, body: Any) -> Any:
        await self._pacer.acquire()
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json")
        start = time.perf_counter()
        try:
            response = await self._client.request(method, path, json=body)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            error = classify_error(exc)
            REQUEST_ATTEMPTS.labels(method=method, status=str(error.status)).inc()
            raise error from exc
        finally:
            REQUEST_LATENCY.labels(method=method).observe(time.perf_counter() - start)
        REQUEST_ATTEMPTS.labels(method=method, status=str(response.status_code)).inc()
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def _execute_with_retry(self, method: str, path: str, body: Any) -> Any:
        max_retries = self._config.max_retries
        attempt = 0
        while True:
            try:
                return await self._send(method, path, body)
            except SleeperError as error:
                if not error.retryable:
                    logger.error("%s %s failed status=%s: %s", method, path, error.status, error.message)
                    raise
                if attempt == max_retries:
                    logger.error(
                        "%s %s failed after %d attempts status=%s: %s",
                        method,
                        path,
                        attempt + 1,
                        error.status,
                        error.message,
                    )
                    raise
                delay = self._config.retry_delay * (2**attempt)
                logger.warning(
                    "%s %s attempt %d/%d failed status=%s, retrying in %.2fs",
                    method,
                    path,
                    attempt + 1,
                    max_retries + 1,
                    error.status,
                    delay,
                )
                RETRY_COUNTER.labels(method=method).inc()
                await asyncio.sleep(delay)
                attempt += 1

    @overload
    async def request(self, method: Method, path: str, body: Any = ..., *, response_model: type[T]) -> Optional[T]: ...

    @overload
    async def request(self, method: Method, path: str, body: Any = ..., *, response_model: None = ...) -> Any: ...

    async def request(self, method: Method, path: str, body: Any = None, *, response_model: Any = None) -> Any:
        """Send a request and return the decoded JSON body.

        Non-JSON 2xx bodies come back as text. A JSON ``null`` body (how
        Sleeper answers lookups of unknown IDs) comes back as ``None``
        without validation.

        With ``response_model`` (a pydantic model or a type such as
        ``List[Roster]``) the body is validated into that type. Failures
        raise :class:`SleeperError` once the retry budget allows no more
        attempts.
        """
        method = method.upper()  # type: ignore[assignment]
        data = await self._execute_with_retry(method, path, body)
        if response_model is None or data is None:
            return data
        return _adapter(response_model).validate_python(data)

    async def get(self, path: str, *, response_model: Any = None) -> Any:
        return await self.request("GET", path, response_model=response_model)

    async def post(self, path: str, body: Any = None, *, response_model: Any = None) -> Any:
        return await self.request("POST", path, body, response_model=response_model)

    async def put(self, path: str, body: Any = None, *, response_model: Any = None) -> Any:
        return await self.request("PUT", path, body, response_model=response_model)

    async def delete(self, path: str, *, response_model: Any = None) -> Any:
        return await self.request("DELETE", path, response_model=response_model)

    def build_query_string(self, params: Mapping[str, QueryValue]) -> str:
        return build_query_string(params)

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["HttpClient", "build_query_string"]
