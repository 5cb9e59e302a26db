"""Domain models for report aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any

from src.domain.models.ledger import Transaction
from src.domain.models.reports import ReportPeriod
from src.utils.decimal_utils import (
    coerce_decimal,
    quantize_money,
    quantize_percent,
)


ZERO = Decimal("0")


@dataclass(frozen=True)
class FinanceSummary:
    """Summary of income and expense totals.

    Attributes:
        total_income: Sum of income amounts.
        total_expense: Sum of expense amounts.
    """

    total_income: Decimal
    total_expense: Decimal

    @property
    def balance(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class CategoryTotal:
    """Total amount for a single category within a period."""

    category_id: int
    name: str
    type: str
    total: Decimal
    percentage: Decimal = ZERO


@dataclass(frozen=True)
class ClassStatistics:
    """Descriptive statistics over the amounts of one category type."""

    mean: Decimal = ZERO
    median: Decimal = ZERO
    mode: Decimal = ZERO
    variance: Decimal = ZERO
    standard_deviation: Decimal = ZERO


@dataclass(frozen=True)
class StatisticsByClass:
    """Class statistics for income and expense amounts."""

    income: ClassStatistics = field(default_factory=ClassStatistics)
    expense: ClassStatistics = field(default_factory=ClassStatistics)


@dataclass(frozen=True)
class CategoryStatistics:
    """Median, mode and count of the amounts of one category."""

    category_id: int
    name: str
    type: str
    median: Decimal
    mode: Decimal
    transaction_count: int


@dataclass(frozen=True)
class MonthlyTotal:
    """Income and expense totals of one calendar month.

    Attributes:
        month: Month key in ``YYYY-MM`` form.
        income: Sum of income amounts dated in the month.
        expense: Sum of expense amounts dated in the month.
    """

    month: str
    income: Decimal = ZERO
    expense: Decimal = ZERO

    @property
    def balance(self) -> Decimal:
        """Return income minus expense for the month."""
        return self.income - self.expense


@dataclass(frozen=True)
class BalancePoint:
    """Cumulative balance right after one transaction."""

    transaction_id: int
    date: date
    change: Decimal
    balance: Decimal


@dataclass(frozen=True)
class ReportPayload:
    """Full report for a period, ready for rendering."""

    period: ReportPeriod
    summary: FinanceSummary
    statistics: StatisticsByClass
    categories: list[CategoryTotal]
    category_statistics: list[CategoryStatistics]
    transactions: list[Transaction]
    monthly_totals: list[MonthlyTotal] = field(default_factory=list)
    running_balance: list[BalancePoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the payload as plain data.

        Amounts are rounded to two decimal places here and nowhere else.

        Returns:
            dict[str, Any]: Payload keyed the way front ends consume it.
        """
        return {
            "period": {
                "from": self.period.date_from.isoformat(),
                "to": self.period.date_to.isoformat(),
            },
            "summary": {
                "totalIncome": quantize_money(self.summary.total_income),
                "totalExpense": quantize_money(self.summary.total_expense),
                "balance": quantize_money(self.summary.balance),
            },
            "statistics": {
                "income": _statistics_to_dict(self.statistics.income),
                "expense": _statistics_to_dict(self.statistics.expense),
            },
            "categories": [
                {
                    "id": item.category_id,
                    "name": item.name,
                    "type": item.type,
                    "total": quantize_money(item.total),
                    "percentage": quantize_percent(item.percentage),
                }
                for item in self.categories
            ],
            "categoryStatistics": [
                {
                    "id": item.category_id,
                    "name": item.name,
                    "type": item.type,
                    "median": quantize_money(item.median),
                    "mode": quantize_money(item.mode),
                    "transactionCount": item.transaction_count,
                }
                for item in self.category_statistics
            ],
            "transactions": [
                _transaction_to_dict(transaction)
                for transaction in self.transactions
            ],
            "monthlyTotals": [
                {
                    "month": item.month,
                    "income": quantize_money(item.income),
                    "expense": quantize_money(item.expense),
                    "balance": quantize_money(item.balance),
                }
                for item in self.monthly_totals
            ],
            "runningBalance": [
                {
                    "transactionId": point.transaction_id,
                    "date": point.date.isoformat(),
                    "change": quantize_money(point.change),
                    "balance": quantize_money(point.balance),
                }
                for point in self.running_balance
            ],
        }


def _statistics_to_dict(stats: ClassStatistics) -> dict[str, Decimal]:
    return {
        "mean": quantize_money(stats.mean),
        "median": quantize_money(stats.median),
        "mode": quantize_money(stats.mode),
        "variance": quantize_money(stats.variance),
        "standardDeviation": quantize_money(stats.standard_deviation),
    }


def _transaction_to_dict(transaction: Transaction) -> dict[str, Any]:
    category = transaction.category
    return {
        "id": transaction.id,
        "amount": quantize_money(coerce_decimal(transaction.amount)),
        "date": transaction.date.isoformat(),
        "comment": transaction.comment,
        "category": {
            "id": category.id,
            "name": category.name,
            "type": category.type,
        }
        if category is not None
        else None,
    }


__all__ = [
    "FinanceSummary",
    "CategoryTotal",
    "ClassStatistics",
    "StatisticsByClass",
    "CategoryStatistics",
    "MonthlyTotal",
    "BalancePoint",
    "ReportPayload",
]
