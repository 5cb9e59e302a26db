"""Descriptive statistics over Decimal amounts.

Every helper returns ``Decimal("0")`` for degenerate input instead of raising,
so empty report periods produce zeroed metrics.
"""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.models.finance import ClassStatistics


ZERO = Decimal("0")
TWO = Decimal("2")


def mean(values: Sequence[Decimal]) -> Decimal:
    """Return the arithmetic average, 0 for no values."""
    if not values:
        return ZERO
    return sum(values, ZERO) / Decimal(len(values))


def median(values: Sequence[Decimal]) -> Decimal:
    """Return the median of the values.

    Args:
        values: Amounts in any order.

    Returns:
        Decimal: Middle value for an odd count, average of the two central
        values for an even count, 0 for no values.
    """
    if not values:
        return ZERO
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[middle]
    return (ordered[middle - 1] + ordered[middle]) / TWO


def mode(values: Sequence[Decimal]) -> Decimal:
    """Return the most frequent value.

    Ties go to the value whose running count reaches the maximum frequency
    first while scanning the values in their original order.

    Args:
        values: Amounts in input order.

    Returns:
        Decimal: Most frequent amount, 0 for no values.
    """
    if not values:
        return ZERO
    frequencies: dict[Decimal, int] = {}
    for value in values:
        frequencies[value] = frequencies.get(value, 0) + 1
    highest = max(frequencies.values())

    running: dict[Decimal, int] = {}
    for value in values:
        running[value] = running.get(value, 0) + 1
        if running[value] == highest:
            return value
    return ZERO


def sample_variance(values: Sequence[Decimal]) -> Decimal:
    """Return the sample variance (n - 1 denominator), 0 when n <= 1."""
    if len(values) <= 1:
        return ZERO
    average = mean(values)
    squared = sum(((value - average) ** 2 for value in values), ZERO)
    return squared / Decimal(len(values) - 1)


def standard_deviation(values: Sequence[Decimal]) -> Decimal:
    """Return the square root of the sample variance."""
    return sample_variance(values).sqrt()


def describe(values: Sequence[Decimal]) -> ClassStatistics:
    """Compute the class statistics for a multiset of amounts.

    Args:
        values: Amounts of one category type in input order.

    Returns:
        ClassStatistics: Mean, median, mode, variance and standard deviation.
    """
    if not values:
        return ClassStatistics()
    variance = sample_variance(values)
    return ClassStatistics(
        mean=mean(values),
        median=median(values),
        mode=mode(values),
        variance=variance,
        standard_deviation=variance.sqrt(),
    )


__all__ = [
    "mean",
    "median",
    "mode",
    "sample_variance",
    "standard_deviation",
    "describe",
]
