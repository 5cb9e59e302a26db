"""Domain models for persisted report pointers."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class ReportPeriod:
    """Inclusive pair of calendar dates bounding a report."""

    date_from: date
    date_to: date


@dataclass(frozen=True)
class ReportRecord:
    """Pointer to a previously requested report period.

    The record never carries computed totals: reloading it recomputes the
    report from the transactions currently stored for the period.

    Attributes:
        id: Identifier assigned by the persistence layer, None before insert.
        user_id: Owner of the pointer.
        report_type: Free-form report kind, ``monthly`` for generated reports.
        period_from: Inclusive lower bound.
        period_to: Inclusive upper bound.
        created_at: Timestamp set when the pointer was saved.
    """

    id: int | None
    user_id: int
    report_type: str
    period_from: date
    period_to: date
    created_at: datetime

    @property
    def period(self) -> ReportPeriod:
        """Return the stored range as a ReportPeriod."""
        return ReportPeriod(date_from=self.period_from, date_to=self.period_to)


__all__ = ["ReportPeriod", "ReportRecord"]
