"""Application port for the transaction store."""

from datetime import date
from typing import Protocol

from src.domain.models import Transaction


class TransactionRepositoryPort(Protocol):
    """Port exposing read access to a user's transactions."""

    def find_by_owner_in_range(
        self,
        user_id: int,
        date_from: date,
        date_to: date,
    ) -> list[Transaction]:
        """Return the user's transactions dated within [date_from, date_to].

        Each transaction carries its resolved category.
        """


__all__ = ["TransactionRepositoryPort"]
