"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

MONEY_QUANTUM = Decimal("0.01")
PERCENT_QUANTUM = Decimal("0.1")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        decimal.InvalidOperation: If the value is not numeric.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_money(value: Decimal) -> Decimal:
    """Round a Decimal to two places for presentation."""
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def quantize_percent(value: Decimal) -> Decimal:
    """Round a percentage to one decimal place for presentation."""
    return value.quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP)


__all__ = [
    "MONEY_QUANTUM",
    "PERCENT_QUANTUM",
    "coerce_decimal",
    "quantize_money",
    "quantize_percent",
]
