"""
Report Exceptions
Error kinds raised by the report configuration and generation pipeline
"""

from typing import Optional


class InvalidConfigurationError(ValueError):
    """Raised when a theme or page format string does not name a known variant"""

    def __init__(self, field: str, value, allowed):
        self.field = field
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid {field} '{value}'. Allowed: {', '.join(self.allowed)}"
        )


class AssetUnavailableError(OSError):
    """Raised when a static asset (the company logo) cannot be read or decoded"""


class ReportGenerationError(Exception):
    """
    Raised when a PDF report cannot be produced.
    The original exception is kept on `cause` and chained as `__cause__`.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
