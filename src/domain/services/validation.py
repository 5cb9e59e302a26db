"""Domain validation helpers."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from src.domain.constants import CATEGORY_TYPES
from src.domain.errors import InvalidInputError, InvalidRangeError
from src.domain.models.ledger import Transaction
from src.domain.models.reports import ReportPeriod
from src.utils.decimal_utils import coerce_decimal


def parse_period_bound(value: date | str, label: str) -> date:
    """Parse a period bound given as a date or an ISO date string.

    Args:
        value: Calendar date or ``YYYY-MM-DD`` string.
        label: Name of the bound, used in error messages.

    Returns:
        date: Parsed calendar date.

    Raises:
        InvalidRangeError: If the value is not an unambiguous calendar date.
    """
    if isinstance(value, datetime):
        raise InvalidRangeError(
            f"{label} must be a calendar date without time, got {value!r}"
        )
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as exc:
            raise InvalidRangeError(
                f"Invalid {label} '{value}'. Expected format YYYY-MM-DD."
            ) from exc
    raise InvalidRangeError(f"Invalid {label}: {value!r}")


def validate_period(
    date_from: date | str,
    date_to: date | str,
) -> ReportPeriod:
    """Return a validated inclusive period.

    Raises:
        InvalidRangeError: If a bound is malformed or date_from > date_to.
    """
    start = parse_period_bound(date_from, "date_from")
    end = parse_period_bound(date_to, "date_to")
    if start > end:
        raise InvalidRangeError(
            f"date_from {start.isoformat()} is after date_to {end.isoformat()}"
        )
    return ReportPeriod(date_from=start, date_to=end)


def validate_transaction(transaction: Transaction) -> Decimal:
    """Check a transaction against the engine contract.

    Args:
        transaction: Transaction with a resolved category.

    Returns:
        Decimal: The transaction amount as a Decimal.

    Raises:
        InvalidInputError: If the category is missing or mistyped, or the
            amount is not a positive finite number.
    """
    category = transaction.category
    if category is None:
        raise InvalidInputError(
            f"Transaction {transaction.id} has no resolved category"
        )
    if category.type not in CATEGORY_TYPES:
        raise InvalidInputError(
            f"Transaction {transaction.id} has category {category.id} "
            f"with unknown type {category.type!r}"
        )
    if isinstance(transaction.amount, bool):
        raise InvalidInputError(
            f"Transaction {transaction.id} has a non-numeric amount"
        )
    try:
        amount = coerce_decimal(transaction.amount)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise InvalidInputError(
            f"Transaction {transaction.id} has a non-numeric amount: "
            f"{transaction.amount!r}"
        ) from exc
    if not amount.is_finite() or amount <= 0:
        raise InvalidInputError(
            f"Transaction {transaction.id} has a non-positive amount: "
            f"{transaction.amount!r}"
        )
    return amount


def validate_transactions(
    transactions: Iterable[Transaction],
) -> list[tuple[Transaction, Decimal]]:
    """Validate every transaction and pair it with its Decimal amount."""
    return [
        (transaction, validate_transaction(transaction))
        for transaction in transactions
    ]


__all__ = [
    "parse_period_bound",
    "validate_period",
    "validate_transaction",
    "validate_transactions",
]
