"""Service objects exposed on ``B2BRouterClient``."""

from .invoices import InvoiceService
from .tax_report_settings import TaxReportSettingService
from .tax_reports import TaxReportService

__all__ = ["InvoiceService", "TaxReportService", "TaxReportSettingService"]
