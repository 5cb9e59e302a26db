"""SQLAlchemy-backed repository for report pointers."""

from dataclasses import replace

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.report_repository import ReportRepositoryPort
from src.domain.models import ReportRecord
from src.utils.date_utils import coerce_date, coerce_datetime


INSERT_REPORT_SQL = text(
    """
    INSERT INTO reports (
        user_id,
        report_type,
        period_from,
        period_to,
        created_at
    )
    VALUES (
        :user_id,
        :report_type,
        :period_from,
        :period_to,
        :created_at
    )
    RETURNING id
    """
)

SELECT_REPORT_BY_ID_SQL = text(
    """
    SELECT id, user_id, report_type, period_from, period_to, created_at
    FROM reports
    WHERE id = :report_id
    """
)

SELECT_REPORTS_BY_OWNER_SQL = text(
    """
    SELECT id, user_id, report_type, period_from, period_to, created_at
    FROM reports
    WHERE user_id = :user_id
    ORDER BY created_at DESC, id DESC
    """
)


class SqlAlchemyReportRepository(ReportRepositoryPort):
    """Repository backed by SQLAlchemy for report pointers."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def insert(self, report: ReportRecord) -> ReportRecord:
        """Store a report pointer and return it with its assigned id."""
        params = {
            "user_id": report.user_id,
            "report_type": report.report_type,
            "period_from": report.period_from,
            "period_to": report.period_to,
            "created_at": report.created_at,
        }
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            report_id = conn.execute(INSERT_REPORT_SQL, params).scalar_one()
        return replace(report, id=report_id)

    def find_by_id(self, report_id: int) -> ReportRecord | None:
        """Return the report pointer with the given id, if any."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_REPORT_BY_ID_SQL,
                {"report_id": report_id},
            ).first()
        if not row:
            return None
        return self._to_record(row)

    def find_all_by_owner(self, user_id: int) -> list[ReportRecord]:
        """Return a user's report pointers, newest first."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_REPORTS_BY_OWNER_SQL,
                {"user_id": user_id},
            ).all()
        return [self._to_record(row) for row in rows]

    @staticmethod
    def _to_record(row) -> ReportRecord:
        return ReportRecord(
            id=row.id,
            user_id=row.user_id,
            report_type=row.report_type,
            period_from=coerce_date(row.period_from),
            period_to=coerce_date(row.period_to),
            created_at=coerce_datetime(row.created_at),
        )


__all__ = ["SqlAlchemyReportRepository"]
