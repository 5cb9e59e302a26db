"""Tests for the reload_report_cli adapter."""

from datetime import date, datetime
from decimal import Decimal

from src.adapters import reload_report_cli
from src.domain.errors import AccessDeniedError
from src.domain.models import Category, ReportRecord, Transaction
from src.domain.services.aggregation import build_report_payload
from src.infrastructure.settings import ReportSettings


class _Logger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def warning(self, msg: str) -> None:
        self.messages.append(msg)

    def error(self, msg: str) -> None:
        self.messages.append(msg)

    def info(self, msg: str) -> None:
        self.messages.append(msg)


class _FakeService:
    def __init__(self) -> None:
        self.report = ReportRecord(
            id=3,
            user_id=1,
            report_type="monthly",
            period_from=date(2024, 1, 1),
            period_to=date(2024, 1, 31),
            created_at=datetime(2024, 2, 1, 8, 30),
        )

    def list_reports(self, user_id):
        return [self.report]

    def reload_report(self, report_id, user_id):
        if user_id != self.report.user_id:
            raise AccessDeniedError(f"Report {report_id} access denied")
        food = Category(id=3, name="Food", type="expense")
        return build_report_payload(
            [Transaction(1, 1, food, Decimal("12.00"), date(2024, 1, 9))],
            self.report.period_from,
            self.report.period_to,
        )


def _patch(monkeypatch, logger) -> None:
    monkeypatch.setattr(
        reload_report_cli,
        "build_report_service",
        lambda: _FakeService(),
    )
    monkeypatch.setattr(reload_report_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        reload_report_cli.ReportSettings,
        "from_env",
        classmethod(lambda cls: ReportSettings()),
    )


def test_main_lists_saved_reports(monkeypatch, capsys):
    """Without REPORT_ID the CLI lists saved pointers."""
    _patch(monkeypatch, _Logger())
    monkeypatch.setenv("REPORT_USER_ID", "1")
    monkeypatch.delenv("REPORT_ID", raising=False)

    reload_report_cli.main()

    out = capsys.readouterr().out
    assert "1 saved reports for user 1" in out
    expected = "#3 monthly 2024-01-01 to 2024-01-31 (saved 2024-02-01 08:30)"
    assert expected in out


def test_main_reloads_report(monkeypatch, capsys):
    """With REPORT_ID the report is recomputed and printed."""
    _patch(monkeypatch, _Logger())
    monkeypatch.setenv("REPORT_USER_ID", "1")
    monkeypatch.setenv("REPORT_ID", "3")

    reload_report_cli.main()

    out = capsys.readouterr().out
    assert "expense: 12.00" in out


def test_main_logs_access_denied(monkeypatch, capsys):
    """Reports of other users are refused."""
    logger = _Logger()
    _patch(monkeypatch, logger)
    monkeypatch.setenv("REPORT_USER_ID", "2")
    monkeypatch.setenv("REPORT_ID", "3")

    reload_report_cli.main()

    assert capsys.readouterr().out == ""
    assert logger.messages == ["Report 3 access denied"]
