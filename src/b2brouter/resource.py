"""Shared request plumbing for the API services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional
from urllib.parse import quote

from .collection import Collection
from .request import build_request
from .response import decode_json, handle_response, raise_for_status

if TYPE_CHECKING:  # pragma: no cover
    from .client import B2BRouterClient


def segment(value: Any) -> str:
    """Percent-encode one path segment (account, id, code)."""
    return quote(str(value), safe="")


class ApiResource:
    def __init__(self, client: "B2BRouterClient") -> None:
        self._client = client

    def _request(self, method: str, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        request = build_request(self._client.config, method, path, params)
        response = self._client.http_client.request(
            request.method,
            request.url,
            request.headers,
            request.body,
            self._client.config.timeout,
        )
        return handle_response(response)

    def _request_raw(self, path: str) -> str:
        request = build_request(self._client.config, "GET", path, raw=True)
        response = self._client.http_client.request(
            request.method,
            request.url,
            request.headers,
            None,
            self._client.config.timeout,
        )
        raise_for_status(response, decode_json(response.body))
        return response.body

    @staticmethod
    def _unwrap(response: Any, key: str) -> Any:
        if isinstance(response, dict) and response.get(key) is not None:
            return response[key]
        return response

    @staticmethod
    def _collection(response: Any, key: str, meta_key: str = "meta") -> Collection:
        if not isinstance(response, dict):
            return Collection([])
        items = response.get(key)
        meta = response.get(meta_key)
        return Collection(
            items if isinstance(items, list) else [],
            meta if isinstance(meta, Mapping) else None,
        )


__all__ = ["ApiResource", "segment"]
