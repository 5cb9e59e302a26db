"""Use case to generate a report for a period from live transactions."""

from datetime import date

from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.errors import InvalidInputError
from src.domain.models import ReportPayload
from src.domain.services.aggregation import build_report_payload
from src.domain.services.validation import validate_period
from src.infrastructure.logging.logger import get_app_logger


class GenerateMonthlyReportUseCase:
    """Compute the report of a user for an inclusive date range."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port returning transactions in a range.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: int,
        date_from: date | str,
        date_to: date | str,
    ) -> ReportPayload:
        """Return the report payload for the period.

        Args:
            user_id: Owner of the transactions.
            date_from: Inclusive lower bound, date or ISO string.
            date_to: Inclusive upper bound, date or ISO string.

        Returns:
            ReportPayload: Summary, statistics and category breakdown.

        Raises:
            InvalidRangeError: If a bound is malformed or out of order.
            InvalidInputError: If the store returned inconsistent data.
        """
        period = validate_period(date_from, date_to)
        transactions = self._transaction_repository.find_by_owner_in_range(
            user_id,
            period.date_from,
            period.date_to,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for user_id={user_id} "
            f"from {period.date_from} to {period.date_to}"
        )
        try:
            payload = build_report_payload(
                transactions,
                period.date_from,
                period.date_to,
            )
        except InvalidInputError as exc:
            self._logger.error(
                f"Rejected transactions for user_id={user_id}: {exc}"
            )
            raise

        self._logger.info(
            f"Report computed: income={payload.summary.total_income}, "
            f"expense={payload.summary.total_expense}, "
            f"categories={len(payload.categories)}"
        )
        return payload


__all__ = ["GenerateMonthlyReportUseCase", "ReportPayload"]
