"""SQLAlchemy-backed repository for transactions."""

from datetime import date

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.models import Category, Transaction
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal


SELECT_TRANSACTIONS_IN_RANGE_SQL = text(
    """
    SELECT t.id AS id,
           t.user_id AS user_id,
           t.amount AS amount,
           t.date AS date,
           t.comment AS comment,
           c.id AS category_id,
           c.name AS category_name,
           c.type AS category_type
    FROM transactions t
    LEFT JOIN categories c ON c.id = t.category_id
    WHERE t.user_id = :user_id
      AND t.date BETWEEN :date_from AND :date_to
    ORDER BY t.date, t.id
    """
)


class SqlAlchemyTransactionRepository(TransactionRepositoryPort):
    """Repository backed by SQLAlchemy for transaction reads."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def find_by_owner_in_range(
        self,
        user_id: int,
        date_from: date,
        date_to: date,
    ) -> list[Transaction]:
        """Return a user's transactions dated within the inclusive range."""
        params = {
            "user_id": user_id,
            "date_from": date_from,
            "date_to": date_to,
        }
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_TRANSACTIONS_IN_RANGE_SQL, params).all()
        return [self._to_transaction(row) for row in rows]

    @staticmethod
    def _to_transaction(row) -> Transaction:
        category = None
        if row.category_id is not None:
            category = Category(
                id=row.category_id,
                name=row.category_name,
                type=row.category_type,
            )
        return Transaction(
            id=row.id,
            user_id=row.user_id,
            category=category,
            amount=coerce_decimal(row.amount),
            date=coerce_date(row.date),
            comment=row.comment,
        )


__all__ = ["SqlAlchemyTransactionRepository"]
