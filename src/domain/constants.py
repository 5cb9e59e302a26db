"""Domain constants for finance reports."""

CATEGORY_TYPE_INCOME = "income"
CATEGORY_TYPE_EXPENSE = "expense"

CATEGORY_TYPES = (
    CATEGORY_TYPE_INCOME,
    CATEGORY_TYPE_EXPENSE,
)

REPORT_TYPE_MONTHLY = "monthly"

DEFAULT_TOP_CATEGORIES = 5


__all__ = [
    "CATEGORY_TYPE_INCOME",
    "CATEGORY_TYPE_EXPENSE",
    "CATEGORY_TYPES",
    "REPORT_TYPE_MONTHLY",
    "DEFAULT_TOP_CATEGORIES",
]
