"""HTTP transports for the B2BRouter client."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping, Optional

import httpx

from .errors import ApiConnectionError

logger = logging.getLogger("b2brouter.http")

BODYLESS_METHODS = frozenset({"GET", "DELETE"})
CONNECT_TIMEOUT = 30.0


@dataclass(frozen=True)
class RawResponse:
    status: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)


class HttpClient:
    """Anything able to perform one HTTP exchange for the client."""

    def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Any = None,
        timeout: float = 80.0,
    ) -> RawResponse:  # pragma: no cover - interface
        raise NotImplementedError

    def close(self) -> None:  # pragma: no cover - optional override
        return None


def _json_default(value: Any) -> Any:
    # Amounts keep their exact digits; the API parses numeric strings.
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _collect_headers(headers: httpx.Headers) -> Dict[str, str]:
    # Original casing is kept; a repeated header keeps its last value.
    return {name.decode("latin-1"): value.decode("latin-1") for name, value in headers.raw}


class HttpxTransport(HttpClient):
    """Single-attempt transport on top of ``httpx.Client``."""

    def __init__(
        self,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        connect_timeout: float = CONNECT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(transport=transport)
        self._connect_timeout = connect_timeout

    def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Any = None,
        timeout: float = 80.0,
    ) -> RawResponse:
        method = method.upper()
        content: Optional[str | bytes] = None
        if body is not None and method not in BODYLESS_METHODS:
            content = body if isinstance(body, (str, bytes)) else json.dumps(body, default=_json_default)

        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(
                method,
                url,
                headers=dict(headers),
                content=content,
                timeout=httpx.Timeout(timeout, connect=min(self._connect_timeout, timeout)),
            )
        except httpx.RequestError as exc:
            raise ApiConnectionError(f"Request to {url} failed: {type(exc).__name__}: {exc}") from exc

        return RawResponse(
            status=response.status_code,
            body=response.text,
            headers=_collect_headers(response.headers),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class RetryingTransport(HttpClient):
    """Retries connection failures with exponential backoff.

    Only ``ApiConnectionError`` is retried. A response carrying any HTTP
    status, 5xx included, is handed back untouched. Attempt ``n`` is
    followed by a sleep of ``retry_delay * 2 ** (n - 1)`` milliseconds, and
    once ``max_retries`` retries have failed the last error propagates.
    """

    def __init__(
        self,
        transport: HttpClient,
        max_retries: int = 3,
        retry_delay: int = 1000,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._transport = transport
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._sleep = sleep

    def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Any = None,
        timeout: float = 80.0,
    ) -> RawResponse:
        attempt = 0
        while True:
            try:
                return self._transport.request(method, url, headers, body, timeout)
            except ApiConnectionError as exc:
                attempt += 1
                if attempt > self.max_retries:
                    raise
                delay_ms = self.retry_delay * (2 ** (attempt - 1))
                logger.warning(
                    "Connection failure on %s %s (retry %s/%s in %sms): %s",
                    method,
                    url,
                    attempt,
                    self.max_retries,
                    delay_ms,
                    exc,
                )
                self._sleep(delay_ms / 1000.0)

    def close(self) -> None:
        self._transport.close()


__all__ = ["HttpClient", "HttpxTransport", "RawResponse", "RetryingTransport"]
