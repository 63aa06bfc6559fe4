"""B2BRouter Python client."""

from .client import B2BRouterClient
from .collection import Collection, PaginationMeta
from .config import ClientConfig
from .errors import (
    ApiConnectionError,
    ApiError,
    AuthenticationError,
    ErrorKind,
    InvalidRequestError,
    MissingParameterError,
    NotFoundError,
    PermissionDeniedError,
)
from .http import HttpClient, HttpxTransport, RawResponse, RetryingTransport

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "AuthenticationError",
    "B2BRouterClient",
    "ClientConfig",
    "Collection",
    "ErrorKind",
    "HttpClient",
    "HttpxTransport",
    "InvalidRequestError",
    "MissingParameterError",
    "NotFoundError",
    "PaginationMeta",
    "PermissionDeniedError",
    "RawResponse",
    "RetryingTransport",
]
