"""Environment parsing shared by the CLI adapters."""

import os


def read_int_env(name: str, logger) -> int | None:
    """Read an integer environment variable.

    Args:
        name: Environment variable name.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed value, or None when missing or invalid.
    """
    raw = os.getenv(name)
    if not raw:
        logger.warning(f"{name} is required.")
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid {name} '{raw}'. Expected an integer.")
        return None


def format_amount(value) -> str:
    """Format a Decimal amount with two decimals."""
    return f"{value:.2f}"


__all__ = ["read_int_env", "format_amount"]
