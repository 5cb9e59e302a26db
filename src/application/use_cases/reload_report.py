"""Use case to recompute a saved report from live transactions."""

from src.application.ports.report_repository import ReportRepositoryPort
from src.application.use_cases.generate_monthly_report import (
    GenerateMonthlyReportUseCase,
)
from src.application.use_cases.report_access import fetch_owned_report
from src.domain.models import ReportPayload
from src.infrastructure.logging.logger import get_app_logger


class ReloadReportUseCase:
    """Re-run report generation for the range of a stored pointer.

    The result reflects the transactions stored now, not the ones that
    existed when the pointer was saved.
    """

    def __init__(
        self,
        report_repository: ReportRepositoryPort,
        generate_report: GenerateMonthlyReportUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            report_repository: Port reading report pointers.
            generate_report: Use case computing a report for a range.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._report_repository = report_repository
        self._generate_report = generate_report
        self._logger = logger or get_app_logger()

    def execute(self, report_id: int, user_id: int) -> ReportPayload:
        """Return the recomputed report.

        Raises:
            NotFoundError: If no pointer has this id.
            AccessDeniedError: If the pointer belongs to another user.
        """
        report = fetch_owned_report(
            self._report_repository,
            report_id,
            user_id,
        )
        self._logger.info(
            f"Reloading report id={report_id} ({report.report_type}) "
            f"for {report.period_from} to {report.period_to}"
        )
        return self._generate_report.execute(
            user_id,
            report.period_from,
            report.period_to,
        )


__all__ = ["ReloadReportUseCase"]
