"""Tax report settings: per-account configuration of each tax authority."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..collection import Collection
from ..request import require_param
from ..resource import ApiResource, segment

DEFAULT_LIMIT = 25


def _field(response: Dict[str, Any], key: str, default: Any) -> Any:
    value = response.get(key)
    return default if value is None else value


class TaxReportSettingService(ApiResource):
    def list(self, account: str, params: Optional[Mapping[str, Any]] = None) -> Collection:
        response = self._request("GET", f"/accounts/{segment(account)}/tax_report_settings", params)
        if not isinstance(response, dict):
            return Collection([])
        settings = response.get("tax_report_settings")
        if not isinstance(settings, list):
            settings = []

        # Pagination fields sit at the top level of this endpoint's response.
        meta = None
        if any(response.get(key) is not None for key in ("total_count", "offset", "limit")):
            meta = {
                "total_count": _field(response, "total_count", len(settings)),
                "offset": _field(response, "offset", 0),
                "limit": _field(response, "limit", DEFAULT_LIMIT),
            }
        return Collection(settings, meta)

    def create(self, account: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        require_param(params, "tax_report_setting")
        response = self._request("POST", f"/accounts/{segment(account)}/tax_report_settings", params)
        return self._unwrap(response, "tax_report_setting")

    def retrieve(self, account: str, code: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        response = self._request("GET", self._path(account, code), params)
        return self._unwrap(response, "tax_report_setting")

    def update(self, account: str, code: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        require_param(params, "tax_report_setting")
        response = self._request("PUT", self._path(account, code), params)
        return self._unwrap(response, "tax_report_setting")

    def delete(self, account: str, code: str) -> Dict[str, Any]:
        response = self._request("DELETE", self._path(account, code))
        return self._unwrap(response, "tax_report_setting")

    @staticmethod
    def _path(account: str, code: str) -> str:
        return f"/accounts/{segment(account)}/tax_report_settings/{segment(code)}"


__all__ = ["TaxReportSettingService"]
