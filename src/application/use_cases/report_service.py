"""Facade bundling the report use cases behind one object.

Every call takes the requesting ``user_id`` explicitly; the service keeps no
per-request state.
"""

from datetime import date, datetime
from typing import Callable

from src.application.ports.report_repository import ReportRepositoryPort
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.application.use_cases.generate_monthly_report import (
    GenerateMonthlyReportUseCase,
)
from src.application.use_cases.get_reports import (
    GetReportUseCase,
    ListReportsUseCase,
)
from src.application.use_cases.reload_report import ReloadReportUseCase
from src.application.use_cases.save_report_pointer import (
    SaveReportPointerUseCase,
)
from src.domain.models import ReportPayload, ReportRecord
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class ReportService:
    """Entry point for generating, saving and reloading reports."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        report_repository: ReportRepositoryPort,
        logger=None,
        usage_logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            transaction_repository: Port returning transactions in a range.
            report_repository: Port persisting report pointers.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording report usage.
            clock: Optional callable stamping saved pointers.
        """
        resolved_logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._generate = GenerateMonthlyReportUseCase(
            transaction_repository,
            logger=resolved_logger,
        )
        self._save = SaveReportPointerUseCase(
            report_repository,
            logger=resolved_logger,
            clock=clock,
        )
        self._reload = ReloadReportUseCase(
            report_repository,
            self._generate,
            logger=resolved_logger,
        )
        self._list = ListReportsUseCase(
            report_repository,
            logger=resolved_logger,
        )
        self._get = GetReportUseCase(
            report_repository,
            logger=resolved_logger,
        )

    def generate_monthly_report(
        self,
        user_id: int,
        date_from: date | str,
        date_to: date | str,
    ) -> ReportPayload:
        """Compute the report for an inclusive date range."""
        payload = self._generate.execute(user_id, date_from, date_to)
        self._usage_logger.info(
            f"user_id={user_id} generated report "
            f"{payload.period.date_from}..{payload.period.date_to}"
        )
        return payload

    def save_report_pointer(
        self,
        user_id: int,
        report_type: str,
        date_from: date | str,
        date_to: date | str,
    ) -> ReportRecord:
        """Persist the range of a report."""
        return self._save.execute(user_id, report_type, date_from, date_to)

    def reload_report(self, report_id: int, user_id: int) -> ReportPayload:
        """Recompute a saved report from current transactions."""
        payload = self._reload.execute(report_id, user_id)
        self._usage_logger.info(
            f"user_id={user_id} reloaded report id={report_id}"
        )
        return payload

    def list_reports(self, user_id: int) -> list[ReportRecord]:
        """Return the user's saved pointers, newest first."""
        return self._list.execute(user_id)

    def get_report(self, report_id: int, user_id: int) -> ReportRecord:
        """Return one saved pointer owned by the user."""
        return self._get.execute(report_id, user_id)


__all__ = ["ReportService"]
