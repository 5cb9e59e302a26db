"""Domain models for ledger records handed to the report engine."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Category:
    """User-defined category.

    Attributes:
        id: Stable category identifier, used as the grouping key.
        name: Display label, unique per user.
        type: Either ``income`` or ``expense``.
    """

    id: int
    name: str
    type: str


@dataclass(frozen=True)
class Transaction:
    """Transaction with its category already resolved."""

    id: int
    user_id: int
    category: Category | None
    amount: Decimal
    date: date
    comment: str | None = None


__all__ = ["Category", "Transaction"]
