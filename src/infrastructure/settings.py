"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_TOP_CATEGORIES, REPORT_TYPE_MONTHLY
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ReportSettings:
    """Settings for report adapters.

    Attributes:
        report_type: Report type stamped on saved pointers.
        top_categories: Number of categories shown per class in summaries.
    """

    report_type: str = REPORT_TYPE_MONTHLY
    top_categories: int = DEFAULT_TOP_CATEGORIES

    @classmethod
    def from_env(cls) -> "ReportSettings":
        """Build settings from environment variables.

        Returns:
            ReportSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        report_type = (
            os.getenv("REPORT_TYPE", REPORT_TYPE_MONTHLY).strip().lower()
            or REPORT_TYPE_MONTHLY
        )
        top_categories = cls._parse_positive_int(
            os.getenv("REPORT_TOP_CATEGORIES"),
            default=DEFAULT_TOP_CATEGORIES,
            logger=get_app_logger(),
        )
        return cls(report_type=report_type, top_categories=top_categories)

    @staticmethod
    def _parse_positive_int(raw: str | None, default: int, logger) -> int:
        """Parse a positive integer, falling back to the default.

        Args:
            raw: Raw environment value.
            default: Value used when raw is missing or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Invalid integer '{raw}', using {default}")
            return default
        if value <= 0:
            logger.warning(f"Expected a positive integer, got {value}")
            return default
        return value


__all__ = ["ReportSettings"]
