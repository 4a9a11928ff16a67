"""
Error taxonomy for report generation.

Every failure is fatal: loaders raise, the CLI logs and exits.
"""

from typing import Optional


class ReportError(Exception):
    """Base class for all errors that abort a report run."""

    def __init__(self, message: str, path: Optional[str] = None, line: Optional[int] = None):
        self.path = path
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.path and self.line:
            return f"{self.path}:{self.line}: {message}"
        if self.path:
            return f"{self.path}: {message}"
        return message


class InputError(ReportError):
    """A required input file or directory could not be read."""


class RecordError(ReportError, ValueError):
    """A record has the wrong number of fields or broken quoting."""


class FieldError(ReportError, ValueError):
    """A field could not be parsed into its expected type."""


class ScaleError(ReportError, ValueError):
    """A rating does not fit the scale established by the series."""
