"""Request construction: URL, authentication headers and payload placement."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from .config import ClientConfig
from .errors import MissingParameterError

QUERY_METHODS = frozenset({"GET", "DELETE"})
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})

API_KEY_HEADER = "X-B2B-API-Key"
API_VERSION_HEADER = "X-B2B-API-Version"


@dataclass(frozen=True)
class ApiRequest:
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None


def _scalar(value: Any) -> str:
    if value is True:
        return "1"
    if value is False:
        return "0"
    return str(value)


def _flatten(prefix: str, value: Any) -> Iterator[Tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _flatten(f"{prefix}[{key}]", item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _flatten(f"{prefix}[{index}]", item)
    else:
        yield prefix, _scalar(value)


def encode_query(params: Mapping[str, Any]) -> str:
    """Form-encode ``params`` the way PHP's ``http_build_query`` does.

    Booleans become ``1``/``0``, ``None`` values are dropped, mappings nest as
    ``key[sub]`` and sequences use indexed keys (``key[0]``, ``key[1]``).
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        pairs.extend(_flatten(str(key), value))
    return urlencode(pairs)


def build_headers(config: ClientConfig, *, raw: bool = False) -> Dict[str, str]:
    headers = {
        API_KEY_HEADER: config.api_key,
        API_VERSION_HEADER: config.api_version,
    }
    if not raw:
        headers["Content-Type"] = "application/json"
        headers["Accept"] = "application/json"
    return headers


def build_request(
    config: ClientConfig,
    method: str,
    path: str,
    params: Optional[Mapping[str, Any]] = None,
    *,
    raw: bool = False,
) -> ApiRequest:
    method = method.upper()
    if method not in QUERY_METHODS and method not in BODY_METHODS:
        raise ValueError(f"Unsupported HTTP method: {method}")

    url = config.api_base + path
    body: Optional[Dict[str, Any]] = None
    if method in QUERY_METHODS:
        if params:
            query = encode_query(params)
            if query:
                url = f"{url}?{query}"
    else:
        body = dict(params or {})

    return ApiRequest(method=method, url=url, headers=build_headers(config, raw=raw), body=body)


def require_param(params: Mapping[str, Any], key: str) -> None:
    if params.get(key) is None:
        raise MissingParameterError(f'The "{key}" parameter is required')


__all__ = [
    "API_KEY_HEADER",
    "API_VERSION_HEADER",
    "ApiRequest",
    "build_headers",
    "build_request",
    "encode_query",
    "require_param",
]
