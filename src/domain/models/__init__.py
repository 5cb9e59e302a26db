"""Domain models package."""

from .finance import (
    BalancePoint,
    CategoryStatistics,
    CategoryTotal,
    ClassStatistics,
    FinanceSummary,
    MonthlyTotal,
    ReportPayload,
    StatisticsByClass,
)
from .ledger import Category, Transaction
from .reports import ReportPeriod, ReportRecord

__all__ = [
    "Category",
    "Transaction",
    "ReportPeriod",
    "ReportRecord",
    "FinanceSummary",
    "CategoryTotal",
    "ClassStatistics",
    "StatisticsByClass",
    "CategoryStatistics",
    "MonthlyTotal",
    "BalancePoint",
    "ReportPayload",
]
