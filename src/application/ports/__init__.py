"""Application ports package."""

from .database import DatabaseEnginePort
from .report_repository import ReportRepositoryPort
from .transaction_repository import TransactionRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "ReportRepositoryPort",
    "TransactionRepositoryPort",
]
