"""Use cases reading stored report pointers."""

from src.application.ports.report_repository import ReportRepositoryPort
from src.application.use_cases.report_access import fetch_owned_report
from src.domain.models import ReportRecord
from src.infrastructure.logging.logger import get_app_logger


class ListReportsUseCase:
    """Return the report pointers saved by a user."""

    def __init__(
        self,
        report_repository: ReportRepositoryPort,
        logger=None,
    ) -> None:
        self._report_repository = report_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: int) -> list[ReportRecord]:
        """Return the user's pointers, newest first."""
        reports = self._report_repository.find_all_by_owner(user_id)
        self._logger.info(
            f"Fetched {len(reports)} saved reports for user_id={user_id}"
        )
        return reports


class GetReportUseCase:
    """Return one report pointer owned by a user."""

    def __init__(
        self,
        report_repository: ReportRepositoryPort,
        logger=None,
    ) -> None:
        self._report_repository = report_repository
        self._logger = logger or get_app_logger()

    def execute(self, report_id: int, user_id: int) -> ReportRecord:
        """Return the pointer.

        Raises:
            NotFoundError: If no pointer has this id.
            AccessDeniedError: If the pointer belongs to another user.
        """
        return fetch_owned_report(self._report_repository, report_id, user_id)


__all__ = ["ListReportsUseCase", "GetReportUseCase"]
