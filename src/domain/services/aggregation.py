"""Aggregation engine turning a period's transactions into a report.

All functions are pure: they read the transactions they are given and return
new values. Transactions are validated up front; a missing category or a
non-positive amount raises ``InvalidInputError`` instead of being skipped.
"""

from collections.abc import Iterable
from dataclasses import replace
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    CATEGORY_TYPE_EXPENSE,
    CATEGORY_TYPE_INCOME,
    DEFAULT_TOP_CATEGORIES,
)
from src.domain.models.finance import (
    BalancePoint,
    CategoryStatistics,
    CategoryTotal,
    FinanceSummary,
    MonthlyTotal,
    ReportPayload,
    StatisticsByClass,
)
from src.domain.models.ledger import Category, Transaction
from src.domain.services.statistics import describe, median, mode
from src.domain.services.validation import (
    validate_period,
    validate_transactions,
)
from src.utils.date_utils import coerce_date


ZERO = Decimal("0")
HUNDRED = Decimal("100")
MONTH_FORMAT = "%Y-%m"


def summarize(transactions: Iterable[Transaction]) -> FinanceSummary:
    """Compute income and expense totals.

    Args:
        transactions: Transactions of one user within one period.

    Returns:
        FinanceSummary: Totals per category type and the resulting balance.
    """
    total_income = ZERO
    total_expense = ZERO
    for transaction, amount in validate_transactions(transactions):
        if transaction.category.type == CATEGORY_TYPE_INCOME:
            total_income += amount
        else:
            total_expense += amount
    return FinanceSummary(
        total_income=total_income,
        total_expense=total_expense,
    )


def group_by_category(
    transactions: Iterable[Transaction],
) -> list[CategoryTotal]:
    """Sum amounts per category id, in order of first appearance.

    Args:
        transactions: Transactions of one user within one period.

    Returns:
        list[CategoryTotal]: One total per category present in the input.
    """
    totals: dict[int, Decimal] = {}
    categories: dict[int, Category] = {}
    for transaction, amount in validate_transactions(transactions):
        category = transaction.category
        if category.id not in totals:
            categories[category.id] = category
            totals[category.id] = amount
        else:
            totals[category.id] += amount
    return [
        CategoryTotal(
            category_id=category_id,
            name=categories[category_id].name,
            type=categories[category_id].type,
            total=total,
        )
        for category_id, total in totals.items()
    ]


def compute_class_statistics(
    transactions: Iterable[Transaction],
) -> StatisticsByClass:
    """Compute descriptive statistics for income and expense amounts.

    Args:
        transactions: Transactions of one user within one period.

    Returns:
        StatisticsByClass: Statistics per category type, zeroed when a type
        has no transactions.
    """
    amounts: dict[str, list[Decimal]] = {
        CATEGORY_TYPE_INCOME: [],
        CATEGORY_TYPE_EXPENSE: [],
    }
    for transaction, amount in validate_transactions(transactions):
        amounts[transaction.category.type].append(amount)
    return StatisticsByClass(
        income=describe(amounts[CATEGORY_TYPE_INCOME]),
        expense=describe(amounts[CATEGORY_TYPE_EXPENSE]),
    )


def compute_category_statistics(
    transactions: Iterable[Transaction],
) -> list[CategoryStatistics]:
    """Compute median, mode and count per category.

    Args:
        transactions: Transactions of one user within one period.

    Returns:
        list[CategoryStatistics]: One entry per category, first-appearance
        order.
    """
    amounts: dict[int, list[Decimal]] = {}
    categories: dict[int, Category] = {}
    for transaction, amount in validate_transactions(transactions):
        category = transaction.category
        if category.id not in amounts:
            categories[category.id] = category
            amounts[category.id] = []
        amounts[category.id].append(amount)
    return [
        CategoryStatistics(
            category_id=category_id,
            name=categories[category_id].name,
            type=categories[category_id].type,
            median=median(values),
            mode=mode(values),
            transaction_count=len(values),
        )
        for category_id, values in amounts.items()
    ]


def compute_category_percentages(
    categories: list[CategoryTotal],
    summary: FinanceSummary,
) -> list[CategoryTotal]:
    """Attach each category's share of its class total.

    Args:
        categories: Category totals from group_by_category.
        summary: Summary of the same transactions.

    Returns:
        list[CategoryTotal]: Copies with ``percentage`` set, 0 when the
        class total is 0.
    """
    class_totals = {
        CATEGORY_TYPE_INCOME: summary.total_income,
        CATEGORY_TYPE_EXPENSE: summary.total_expense,
    }
    result: list[CategoryTotal] = []
    for item in categories:
        class_total = class_totals.get(item.type, ZERO)
        percentage = ZERO
        if class_total:
            percentage = item.total / class_total * HUNDRED
        result.append(
            CategoryTotal(
                category_id=item.category_id,
                name=item.name,
                type=item.type,
                total=item.total,
                percentage=percentage,
            )
        )
    return result


def group_by_month(
    transactions: Iterable[Transaction],
) -> list[MonthlyTotal]:
    """Sum income and expense per calendar month.

    Args:
        transactions: Transactions of one user within one period.

    Returns:
        list[MonthlyTotal]: One entry per ``YYYY-MM`` present in the input,
        in chronological order.
    """
    income: dict[str, Decimal] = {}
    expense: dict[str, Decimal] = {}
    for transaction, amount in validate_transactions(transactions):
        month = coerce_date(transaction.date).strftime(MONTH_FORMAT)
        income.setdefault(month, ZERO)
        expense.setdefault(month, ZERO)
        if transaction.category.type == CATEGORY_TYPE_INCOME:
            income[month] += amount
        else:
            expense[month] += amount
    return [
        MonthlyTotal(month=month, income=income[month], expense=expense[month])
        for month in sorted(income)
    ]


def running_balance(
    transactions: Iterable[Transaction],
) -> list[BalancePoint]:
    """Accumulate the balance transaction by transaction.

    Transactions are ordered by date; same-day transactions keep their
    input order. Income adds to the balance and expense subtracts from it.

    Args:
        transactions: Transactions of one user within one period.

    Returns:
        list[BalancePoint]: The balance after each transaction.
    """
    validated = validate_transactions(transactions)
    ordered = sorted(
        validated,
        key=lambda pair: coerce_date(pair[0].date),
    )
    balance = ZERO
    points: list[BalancePoint] = []
    for transaction, amount in ordered:
        change = amount
        if transaction.category.type == CATEGORY_TYPE_EXPENSE:
            change = -amount
        balance += change
        points.append(
            BalancePoint(
                transaction_id=transaction.id,
                date=coerce_date(transaction.date),
                change=change,
                balance=balance,
            )
        )
    return points


def top_categories(
    categories: list[CategoryTotal],
    category_type: str,
    limit: int = DEFAULT_TOP_CATEGORIES,
) -> list[CategoryTotal]:
    """Return the largest categories of one type, by total descending."""
    matching = [item for item in categories if item.type == category_type]
    ranked = sorted(matching, key=lambda item: item.total, reverse=True)
    return ranked[:max(limit, 0)]


def build_report_payload(
    transactions: Iterable[Transaction],
    date_from: date,
    date_to: date,
) -> ReportPayload:
    """Assemble the full report for a period.

    Args:
        transactions: Transactions of one user within the period.
        date_from: Inclusive lower bound of the period.
        date_to: Inclusive upper bound of the period.

    Returns:
        ReportPayload: Summary, statistics, category totals, monthly
        totals, the running balance and the transactions with Decimal
        amounts.
    """
    period = validate_period(date_from, date_to)
    rows = [
        replace(transaction, amount=amount)
        for transaction, amount in validate_transactions(transactions)
    ]
    summary = summarize(rows)
    categories = compute_category_percentages(group_by_category(rows), summary)
    return ReportPayload(
        period=period,
        summary=summary,
        statistics=compute_class_statistics(rows),
        categories=categories,
        category_statistics=compute_category_statistics(rows),
        transactions=rows,
        monthly_totals=group_by_month(rows),
        running_balance=running_balance(rows),
    )


__all__ = [
    "summarize",
    "group_by_category",
    "compute_class_statistics",
    "compute_category_statistics",
    "compute_category_percentages",
    "group_by_month",
    "running_balance",
    "top_categories",
    "build_report_payload",
]
