"""Tests for the ReportService facade."""

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.report_service import ReportService
from src.domain.models import Category, Transaction


def _service(transactions: list[Transaction]):
    transaction_repository = MagicMock()
    transaction_repository.find_by_owner_in_range.return_value = transactions
    stored = {}

    def _insert(report):
        saved = replace(report, id=len(stored) + 1)
        stored[saved.id] = saved
        return saved

    report_repository = MagicMock()
    report_repository.insert.side_effect = _insert
    report_repository.find_by_id.side_effect = stored.get
    report_repository.find_all_by_owner.side_effect = lambda user_id: sorted(
        (report for report in stored.values() if report.user_id == user_id),
        key=lambda report: report.created_at,
        reverse=True,
    )
    usage_logger = MagicMock()
    service = ReportService(
        transaction_repository=transaction_repository,
        report_repository=report_repository,
        logger=MagicMock(),
        usage_logger=usage_logger,
        clock=lambda: datetime(2024, 2, 1, 10, 0),
    )
    return service, transaction_repository, usage_logger


def test_generate_save_and_reload_round_trip() -> None:
    """A saved pointer reloads into the same report over unchanged data."""
    salary = Category(id=1, name="Salary", type="income")
    transactions = [
        Transaction(
            id=1,
            user_id=9,
            category=salary,
            amount=Decimal("1500.00"),
            date=date(2024, 1, 25),
        )
    ]
    service, transaction_repository, usage_logger = _service(transactions)

    generated = service.generate_monthly_report(9, "2024-01-01", "2024-01-31")
    report = service.save_report_pointer(
        9,
        "monthly",
        generated.period.date_from,
        generated.period.date_to,
    )
    reloaded = service.reload_report(report.id, 9)

    assert reloaded == generated
    assert service.get_report(report.id, 9) == report
    assert service.list_reports(9) == [report]
    assert transaction_repository.find_by_owner_in_range.call_count == 2
    assert usage_logger.info.call_count == 2
