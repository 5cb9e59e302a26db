"""Use case to persist a report pointer."""

from datetime import date, datetime
from typing import Callable

from src.application.ports.report_repository import ReportRepositoryPort
from src.domain.errors import InvalidInputError
from src.domain.models import ReportRecord
from src.domain.services.validation import validate_period
from src.infrastructure.logging.logger import get_app_logger


class SaveReportPointerUseCase:
    """Store the range of a generated report without its computed values."""

    def __init__(
        self,
        report_repository: ReportRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            report_repository: Port persisting report pointers.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the creation timestamp.
        """
        self._report_repository = report_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now

    def execute(
        self,
        user_id: int,
        report_type: str,
        date_from: date | str,
        date_to: date | str,
    ) -> ReportRecord:
        """Persist the pointer and return it with its id.

        Raises:
            InvalidRangeError: If a bound is malformed or out of order.
            InvalidInputError: If report_type is empty.
        """
        if not report_type or not report_type.strip():
            raise InvalidInputError("report_type must not be empty")
        period = validate_period(date_from, date_to)
        report = self._report_repository.insert(
            ReportRecord(
                id=None,
                user_id=user_id,
                report_type=report_type.strip(),
                period_from=period.date_from,
                period_to=period.date_to,
                created_at=self._clock(),
            )
        )
        self._logger.info(
            f"Saved {report.report_type} report id={report.id} "
            f"for user_id={user_id}"
        )
        return report


__all__ = ["SaveReportPointerUseCase"]
