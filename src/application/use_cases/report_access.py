"""Ownership checks for stored report pointers."""

from src.application.ports.report_repository import ReportRepositoryPort
from src.domain.errors import AccessDeniedError, NotFoundError
from src.domain.models import ReportRecord


def fetch_owned_report(
    report_repository: ReportRepositoryPort,
    report_id: int,
    user_id: int,
) -> ReportRecord:
    """Return a report pointer after checking that the user owns it.

    Args:
        report_repository: Port reading report pointers.
        report_id: Identifier of the pointer.
        user_id: User requesting the pointer.

    Returns:
        ReportRecord: The stored pointer.

    Raises:
        NotFoundError: If no pointer has this id.
        AccessDeniedError: If the pointer belongs to another user.
    """
    report = report_repository.find_by_id(report_id)
    if report is None:
        raise NotFoundError(f"Report {report_id} not found")
    if report.user_id != user_id:
        raise AccessDeniedError(f"Report {report_id} access denied")
    return report


__all__ = ["fetch_owned_report"]
