"""Error types raised by the B2BRouter client."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional

REQUEST_ID_HEADER = "X-Request-Id"


class ErrorKind(str, Enum):
    API = "api_error"
    AUTHENTICATION = "authentication_error"
    PERMISSION = "permission_error"
    NOT_FOUND = "not_found_error"
    INVALID_REQUEST = "invalid_request_error"
    CONNECTION = "connection_error"


def _request_id(headers: Optional[Mapping[str, str]]) -> Optional[str]:
    if not headers:
        return None
    if REQUEST_ID_HEADER in headers:
        return headers[REQUEST_ID_HEADER]
    # HTTP/2 responses arrive with lower-cased header names.
    wanted = REQUEST_ID_HEADER.lower()
    for name, value in headers.items():
        if name.lower() == wanted:
            return value
    return None


class ApiError(Exception):
    """Failure reported by, or on the way to, the B2BRouter API.

    ``kind`` tags the failure class so callers can ``match error.kind``
    instead of relying on the subclass. The subclasses below only pin the
    tag, which keeps ``except NotFoundError`` available as well.
    """

    kind: ErrorKind = ErrorKind.API

    def __init__(
        self,
        message: str,
        http_status: Optional[int] = None,
        http_body: Optional[str] = None,
        json_body: Any = None,
        http_headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.http_body = http_body
        self.json_body = json_body
        self.http_headers: Optional[Dict[str, str]] = dict(http_headers) if http_headers is not None else None
        self.request_id = _request_id(self.http_headers)

    @classmethod
    def from_response(
        cls,
        message: str,
        http_status: int,
        http_body: Optional[str] = None,
        json_body: Any = None,
        http_headers: Optional[Mapping[str, str]] = None,
    ) -> "ApiError":
        error_cls = _STATUS_ERRORS.get(http_status, ApiError)
        return error_cls(message, http_status, http_body, json_body, http_headers)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"http_status={self.http_status!r}, request_id={self.request_id!r})"
        )


class AuthenticationError(ApiError):
    """401: the API key was missing or rejected."""

    kind = ErrorKind.AUTHENTICATION


class PermissionDeniedError(ApiError):
    """403: the API key may not access the resource."""

    kind = ErrorKind.PERMISSION


class NotFoundError(ApiError):
    """404: the resource does not exist."""

    kind = ErrorKind.NOT_FOUND


class InvalidRequestError(ApiError):
    """400/422: the request was malformed or failed validation."""

    kind = ErrorKind.INVALID_REQUEST


class ApiConnectionError(ApiError):
    """No response was received (DNS, refused connection, timeout, TLS)."""

    kind = ErrorKind.CONNECTION


class MissingParameterError(ValueError):
    """A required request parameter was not supplied by the caller."""


_STATUS_ERRORS = {
    400: InvalidRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    422: InvalidRequestError,
}


__all__ = [
    "ApiConnectionError",
    "ApiError",
    "AuthenticationError",
    "ErrorKind",
    "InvalidRequestError",
    "MissingParameterError",
    "NotFoundError",
    "PermissionDeniedError",
    "REQUEST_ID_HEADER",
]
