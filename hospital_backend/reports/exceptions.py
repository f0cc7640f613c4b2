"""
Exceptions raised by the daily report query and export layers.

Views translate them into user notifications (HTML) or payload entries (API).
"""

from __future__ import annotations

from typing import Any


class DailyReportError(Exception):
    """Base exception for all daily report errors."""

    def __init__(self, message: str, *, source: str | None = None):
        self.message = message
        self.source = source
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = {'detail': self.message}
        if self.source:
            result['source'] = self.source
        return result


class RecordsFetchError(DailyReportError):
    """
    Raised when one of the record store queries fails.

    ``source`` names the failing fetch ('patients', 'appointments',
    'daily_reports'); ``message`` is the user-facing notification text.
    """


class ReportExportError(DailyReportError):
    """Raised when the PDF document cannot be generated."""

    def __init__(self, message: str = "Failed to generate PDF report", *, source: str | None = 'export'):
        super().__init__(message, source=source)
