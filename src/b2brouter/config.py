"""Configuration objects for the B2BRouter Python client."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_BASE = "https://api-staging.b2brouter.net"
DEFAULT_API_VERSION = "2025-10-13"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    api_base: str = DEFAULT_API_BASE
    api_version: str = DEFAULT_API_VERSION
    timeout: float = 80.0
    max_retries: int = 3
    retry_delay: int = 1000  # milliseconds

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("API key cannot be empty")
        if self.max_retries < 0:
            raise ValueError("max_retries must be zero or greater")
        if self.retry_delay < 0:
            raise ValueError("retry_delay must be zero or greater")
        object.__setattr__(self, "api_base", self.api_base.rstrip("/"))

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls(
            api_key=os.environ.get("B2B_API_KEY", ""),
            api_base=os.environ.get("B2B_API_BASE") or DEFAULT_API_BASE,
            api_version=os.environ.get("B2B_API_VERSION") or DEFAULT_API_VERSION,
            timeout=float(os.environ.get("B2B_TIMEOUT", "80")),
            max_retries=int(os.environ.get("B2B_MAX_RETRIES", "3")),
            retry_delay=int(os.environ.get("B2B_RETRY_DELAY", "1000")),
        )


__all__ = ["ClientConfig", "DEFAULT_API_BASE", "DEFAULT_API_VERSION"]
