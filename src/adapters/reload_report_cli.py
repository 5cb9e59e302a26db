"""CLI adapter to list saved reports or reload one of them.

``REPORT_USER_ID`` selects the user. With ``REPORT_ID`` set the report is
recomputed from current transactions, otherwise saved pointers are listed.
"""

import os

from src.adapters.cli_env import read_int_env
from src.adapters.generate_report_cli import print_report
from src.domain.errors import ReportError
from src.infrastructure.container import build_report_service
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ReportSettings


def main() -> None:
    """List or reload saved reports."""
    logger = get_app_logger()
    settings = ReportSettings.from_env()
    user_id = read_int_env("REPORT_USER_ID", logger)
    if user_id is None:
        return

    service = build_report_service()
    if not os.getenv("REPORT_ID"):
        reports = service.list_reports(user_id)
        print(f"{len(reports)} saved reports for user {user_id}")
        for report in reports:
            print(
                f"  #{report.id} {report.report_type} "
                f"{report.period_from} to {report.period_to} "
                f"(saved {report.created_at:%Y-%m-%d %H:%M})"
            )
        return

    report_id = read_int_env("REPORT_ID", logger)
    if report_id is None:
        return
    try:
        payload = service.reload_report(report_id, user_id)
    except ReportError as exc:
        logger.error(str(exc))
        return
    print_report(payload, settings.top_categories)


if __name__ == "__main__":  # pragma: no cover
    main()
