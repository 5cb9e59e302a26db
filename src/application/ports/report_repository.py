"""Application port for report pointer persistence."""

from typing import Protocol

from src.domain.models import ReportRecord


class ReportRepositoryPort(Protocol):
    """Port storing report pointers, never computed report values."""

    def insert(self, report: ReportRecord) -> ReportRecord:
        """Persist a pointer and return it with its assigned id."""

    def find_by_id(self, report_id: int) -> ReportRecord | None:
        """Return the pointer with the given id, or None."""

    def find_all_by_owner(self, user_id: int) -> list[ReportRecord]:
        """Return every pointer of the user, newest first."""


__all__ = ["ReportRepositoryPort"]
