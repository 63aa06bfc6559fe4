"""Invoice endpoints."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..collection import Collection
from ..request import require_param
from ..resource import ApiResource, segment


class InvoiceService(ApiResource):
    """Create, read, update, list and deliver invoices.

    Single-invoice calls return the payload found under the ``invoice`` key
    of the response (or the whole response when the key is absent).
    """

    def create(self, account: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Create an invoice; ``params`` must hold ``invoice`` and may add
        ``send_after_import`` or ``ack``."""
        require_param(params, "invoice")
        response = self._request("POST", f"/accounts/{segment(account)}/invoices", params)
        return self._unwrap(response, "invoice")

    def retrieve(self, invoice_id: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        response = self._request("GET", f"/invoices/{segment(invoice_id)}", params)
        return self._unwrap(response, "invoice")

    def update(self, invoice_id: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        require_param(params, "invoice")
        response = self._request("PUT", f"/invoices/{segment(invoice_id)}", params)
        return self._unwrap(response, "invoice")

    def delete(self, invoice_id: str) -> Dict[str, Any]:
        response = self._request("DELETE", f"/invoices/{segment(invoice_id)}")
        return self._unwrap(response, "invoice")

    def list(self, account: str, params: Optional[Mapping[str, Any]] = None) -> Collection:
        """List invoices of an account.

        ``params`` go to the query string verbatim: ``offset``, ``limit``
        (max 500) and filters such as ``date_from``, ``date_to``, ``number``,
        ``taxcode`` or the status flags (``sent``, ``error``, ``accepted``...).
        """
        response = self._request("GET", f"/accounts/{segment(account)}/invoices", params)
        return self._collection(response, "invoices")

    def import_invoice(self, account: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        response = self._request("POST", f"/accounts/{segment(account)}/invoices/import", params)
        return self._unwrap(response, "invoice")

    def mark_as(self, invoice_id: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        response = self._request("POST", f"/invoices/{segment(invoice_id)}/mark_as", params)
        return self._unwrap(response, "invoice")

    def validate(self, invoice_id: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return self._request("GET", f"/invoices/{segment(invoice_id)}/validate", params)

    def send(self, invoice_id: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return self._request("POST", f"/invoices/send_invoice/{segment(invoice_id)}", params)

    def acknowledge(self, invoice_id: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return self._request("POST", f"/invoices/{segment(invoice_id)}/ack", params)


__all__ = ["InvoiceService"]
