"""Python client for the B2BRouter API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import DEFAULT_API_BASE, DEFAULT_API_VERSION, ClientConfig
from .http import HttpClient, HttpxTransport, RetryingTransport
from .services import InvoiceService, TaxReportService, TaxReportSettingService

logger = logging.getLogger("b2brouter.client")


class B2BRouterClient:
    """Entry point holding the configuration, the HTTP stack and the services.

    ``http_client`` replaces the whole HTTP stack (retries included) with any
    object implementing ``HttpClient.request``; ``transport`` only swaps the
    ``httpx`` transport underneath the default stack. Settings come either
    from ``api_key`` plus keyword options or from a ready ``config``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        api_base: str = DEFAULT_API_BASE,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 80.0,
        max_retries: int = 3,
        retry_delay: int = 1000,
        http_client: Optional[HttpClient] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if config is None:
            config = ClientConfig(
                api_key=api_key or "",
                api_base=api_base,
                api_version=api_version,
                timeout=timeout,
                max_retries=max_retries,
                retry_delay=retry_delay,
            )
        elif api_key is not None:
            raise ValueError("Pass either api_key or config, not both")

        self._config = config
        if http_client is None:
            http_client = RetryingTransport(
                HttpxTransport(transport=transport),
                max_retries=config.max_retries,
                retry_delay=config.retry_delay,
            )
        self._http_client = http_client
        self.invoices = InvoiceService(self)
        self.tax_reports = TaxReportService(self)
        self.tax_report_settings = TaxReportSettingService(self)
        logger.debug("B2BRouter client ready api_base=%s api_version=%s", config.api_base, config.api_version)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        http_client: Optional[HttpClient] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "B2BRouterClient":
        return cls(config=config, http_client=http_client, transport=transport)

    def __enter__(self) -> "B2BRouterClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def http_client(self) -> HttpClient:
        return self._http_client

    @property
    def api_key(self) -> str:
        return self._config.api_key

    @property
    def api_base(self) -> str:
        return self._config.api_base

    @property
    def api_version(self) -> str:
        return self._config.api_version

    @property
    def timeout(self) -> float:
        return self._config.timeout

    def close(self) -> None:
        close = getattr(self._http_client, "close", None)
        if close is not None:
            close()


__all__ = ["B2BRouterClient"]
