"""Daily price report: fetch each tracked page, extract, compare, notify."""

from pricewatch.tracker.items import TrackedItem, load_items
from pricewatch.tracker.service import PriceReportService, ReportResult, create_report_service

__all__ = [
    "PriceReportService",
    "ReportResult",
    "TrackedItem",
    "create_report_service",
    "load_items",
]
