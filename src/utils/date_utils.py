"""Helpers for date normalization of database values."""

from datetime import date, datetime


def coerce_date(value) -> date:
    """Normalize a database date value to a date.

    Args:
        value: date, datetime or ISO string returned by a driver.

    Returns:
        date: Calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def coerce_datetime(value) -> datetime:
    """Normalize a database timestamp value to a datetime."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(str(value))


__all__ = ["coerce_date", "coerce_datetime"]
