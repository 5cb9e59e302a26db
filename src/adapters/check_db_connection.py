"""CLI to check the finance database before generating reports.

Connects with the URL configured in ``FINANCE_DB_URL`` and verifies that the
tables the repositories read and write are present. Exits with status 1 when
any of them is missing.
"""

from sqlalchemy import inspect

from src.infrastructure.container import build_database_adapter
from src.infrastructure.db import DATABASE_URL_ENV
from src.infrastructure.logging.logger import get_app_logger


REQUIRED_TABLES = ("categories", "transactions", "reports")


def main() -> None:
    """Run a connectivity and schema check against the finance database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_engine()
    logger.info(f"Checking finance DB from {DATABASE_URL_ENV}: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
        inspector = inspect(conn)
        missing = [
            table for table in REQUIRED_TABLES
            if not inspector.has_table(table)
        ]

    if missing:
        logger.error(f"Missing report tables: {', '.join(missing)}")
        raise SystemExit(1)
    logger.info("Connection is working and report tables are present.")


if __name__ == "__main__":
    main()
