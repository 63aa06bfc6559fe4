"""Tax report endpoints (VeriFactu, TicketBAI)."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..collection import Collection
from ..request import require_param
from ..resource import ApiResource, segment


class TaxReportService(ApiResource):
    def list(self, account: str, params: Optional[Mapping[str, Any]] = None) -> Collection:
        """Filters: ``invoice_id``, ``sent_at_from``, ``updated_at_from``."""
        response = self._request("GET", f"/accounts/{segment(account)}/tax_reports", params)
        return self._collection(response, "tax_reports")

    def retrieve(self, report_id: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        response = self._request("GET", f"/tax_reports/{segment(report_id)}", params)
        return self._unwrap(response, "tax_report")

    def create(self, account: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        require_param(params, "tax_report")
        response = self._request("POST", f"/accounts/{segment(account)}/tax_reports", params)
        return self._unwrap(response, "tax_report")

    def update(self, report_id: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Update a pending report, or issue a correction once registered."""
        require_param(params, "tax_report")
        response = self._request("PATCH", f"/tax_reports/{segment(report_id)}", params)
        return self._unwrap(response, "tax_report")

    def delete(self, report_id: str) -> Dict[str, Any]:
        """Annul a report; the API answers with the annulment report."""
        response = self._request("DELETE", f"/tax_reports/{segment(report_id)}")
        return self._unwrap(response, "tax_report")

    def download(self, report_id: str) -> str:
        """Return the XML document of a report as text."""
        return self._request_raw(f"/tax_reports/{segment(report_id)}/download")


__all__ = ["TaxReportService"]
