"""Application use cases package."""

from .generate_monthly_report import GenerateMonthlyReportUseCase
from .get_reports import GetReportUseCase, ListReportsUseCase
from .reload_report import ReloadReportUseCase
from .report_service import ReportService
from .save_report_pointer import SaveReportPointerUseCase

__all__ = [
    "GenerateMonthlyReportUseCase",
    "GetReportUseCase",
    "ListReportsUseCase",
    "ReloadReportUseCase",
    "ReportService",
    "SaveReportPointerUseCase",
]
