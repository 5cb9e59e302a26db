"""CLI adapter to generate a report for a date range.

Configuration comes from environment variables: ``REPORT_USER_ID``,
``REPORT_FROM`` and ``REPORT_TO`` select the report, ``REPORT_SAVE=1`` also
stores a pointer to it and ``REPORT_OUTPUT=json`` prints the full payload.
"""

import json
import os

from src.adapters.cli_env import format_amount, read_int_env
from src.domain.constants import CATEGORY_TYPE_EXPENSE, CATEGORY_TYPE_INCOME
from src.domain.errors import ReportError
from src.domain.models import ReportPayload
from src.domain.services.aggregation import top_categories
from src.infrastructure.container import build_report_service
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ReportSettings


def print_report(payload: ReportPayload, top_limit: int) -> None:
    """Print a human readable summary of a report."""
    summary = payload.summary
    print(
        f"Report {payload.period.date_from} to {payload.period.date_to}"
    )
    print(
        f"Income: {format_amount(summary.total_income)}, "
        f"expense: {format_amount(summary.total_expense)}, "
        f"balance: {format_amount(summary.balance)}"
    )
    for label, stats in (
        ("Income", payload.statistics.income),
        ("Expense", payload.statistics.expense),
    ):
        print(
            f"{label} stats: mean={format_amount(stats.mean)}, "
            f"median={format_amount(stats.median)}, "
            f"mode={format_amount(stats.mode)}, "
            f"variance={format_amount(stats.variance)}, "
            f"std={format_amount(stats.standard_deviation)}"
        )
    for category_type in (CATEGORY_TYPE_INCOME, CATEGORY_TYPE_EXPENSE):
        top = top_categories(payload.categories, category_type, top_limit)
        if not top:
            continue
        print(f"Top {category_type} categories:")
        for item in top:
            print(
                f"  {item.name}: {format_amount(item.total)} "
                f"({item.percentage:.1f}%)"
            )
    for month in payload.monthly_totals:
        print(
            f"{month.month}: income={format_amount(month.income)}, "
            f"expense={format_amount(month.expense)}, "
            f"balance={format_amount(month.balance)}"
        )


def main() -> None:
    """Generate a report and print it."""
    logger = get_app_logger()
    settings = ReportSettings.from_env()
    user_id = read_int_env("REPORT_USER_ID", logger)
    date_from = os.getenv("REPORT_FROM")
    date_to = os.getenv("REPORT_TO")
    if user_id is None or not date_from or not date_to:
        logger.warning(
            "REPORT_USER_ID, REPORT_FROM and REPORT_TO are required."
        )
        return

    service = build_report_service()
    try:
        payload = service.generate_monthly_report(user_id, date_from, date_to)
        if os.getenv("REPORT_SAVE") == "1":
            report = service.save_report_pointer(
                user_id,
                settings.report_type,
                payload.period.date_from,
                payload.period.date_to,
            )
            print(f"Saved report id={report.id}")
    except ReportError as exc:
        logger.error(str(exc))
        return

    if os.getenv("REPORT_OUTPUT", "").strip().lower() == "json":
        print(json.dumps(payload.to_dict(), default=str, indent=2))
        return
    print_report(payload, settings.top_categories)


if __name__ == "__main__":  # pragma: no cover
    main()
