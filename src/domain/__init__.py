"""Domain package for report rules and core models."""

from .constants import (
    CATEGORY_TYPE_EXPENSE,
    CATEGORY_TYPE_INCOME,
    CATEGORY_TYPES,
    REPORT_TYPE_MONTHLY,
)
from .errors import (
    AccessDeniedError,
    InvalidInputError,
    InvalidRangeError,
    NotFoundError,
    ReportError,
)
from .models import (
    Category,
    CategoryStatistics,
    CategoryTotal,
    ClassStatistics,
    FinanceSummary,
    ReportPayload,
    ReportPeriod,
    ReportRecord,
    StatisticsByClass,
    Transaction,
)
from .services import (
    build_report_payload,
    compute_category_statistics,
    compute_class_statistics,
    group_by_category,
    summarize,
)

__all__ = [
    "CATEGORY_TYPE_EXPENSE",
    "CATEGORY_TYPE_INCOME",
    "CATEGORY_TYPES",
    "REPORT_TYPE_MONTHLY",
    "AccessDeniedError",
    "InvalidInputError",
    "InvalidRangeError",
    "NotFoundError",
    "ReportError",
    "Category",
    "CategoryStatistics",
    "CategoryTotal",
    "ClassStatistics",
    "FinanceSummary",
    "ReportPayload",
    "ReportPeriod",
    "ReportRecord",
    "StatisticsByClass",
    "Transaction",
    "build_report_payload",
    "compute_category_statistics",
    "compute_class_statistics",
    "group_by_category",
    "summarize",
]
