"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.report_repository import ReportRepositoryPort
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.application.use_cases.report_service import ReportService
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from src.infrastructure.report_repository import SqlAlchemyReportRepository
from src.infrastructure.transaction_repository import (
    SqlAlchemyTransactionRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_transaction_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionRepositoryPort:
    """Return the transaction store adapter."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionRepository(resolved_db)


def build_report_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ReportRepositoryPort:
    """Return the report pointer store adapter."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyReportRepository(resolved_db)


def build_report_service(
    db_port: DatabaseEnginePort | None = None,
) -> ReportService:
    """Return the report service wired to the SQLAlchemy adapters."""
    resolved_db = db_port or build_database_adapter()
    return ReportService(
        transaction_repository=build_transaction_repository(resolved_db),
        report_repository=build_report_repository(resolved_db),
        logger=get_app_logger(),
        usage_logger=get_usage_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_transaction_repository",
    "build_report_repository",
    "build_report_service",
]
