"""Error taxonomy for report generation.

Errors propagate unchanged to the caller; translating them into user-facing
responses is the job of the transport layer.
"""


class ReportError(Exception):
    """Base class for report errors."""


class InvalidRangeError(ReportError):
    """Raised when a period is malformed or its start is after its end."""


class InvalidInputError(ReportError):
    """Raised when input data violates the engine contract."""


class NotFoundError(ReportError):
    """Raised when a report pointer does not exist."""


class AccessDeniedError(ReportError):
    """Raised when a report pointer belongs to another user."""


__all__ = [
    "ReportError",
    "InvalidRangeError",
    "InvalidInputError",
    "NotFoundError",
    "AccessDeniedError",
]
