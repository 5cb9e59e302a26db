"""Domain services package."""

from .aggregation import (
    build_report_payload,
    compute_category_percentages,
    compute_category_statistics,
    compute_class_statistics,
    group_by_category,
    group_by_month,
    running_balance,
    summarize,
    top_categories,
)
from .statistics import (
    describe,
    mean,
    median,
    mode,
    sample_variance,
    standard_deviation,
)
from .validation import (
    parse_period_bound,
    validate_period,
    validate_transaction,
    validate_transactions,
)

__all__ = [
    "build_report_payload",
    "compute_category_percentages",
    "compute_category_statistics",
    "compute_class_statistics",
    "group_by_category",
    "group_by_month",
    "running_balance",
    "summarize",
    "top_categories",
    "describe",
    "mean",
    "median",
    "mode",
    "sample_variance",
    "standard_deviation",
    "parse_period_bound",
    "validate_period",
    "validate_transaction",
    "validate_transactions",
]
