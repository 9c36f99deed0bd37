"""Exceptions raised while fetching and rendering issue reports."""

NO_ISSUES_TO_REPORT = "no issues to report"


class SnitchError(Exception):
    """Base class for all report errors."""


class NoIssuesToReportError(SnitchError):
    """Raised when a report is requested for an empty issue list."""

    def __init__(self, message: str = NO_ISSUES_TO_REPORT):
        super().__init__(message)


class InvalidReportTypeError(SnitchError, TypeError):
    """Raised when the report name matches no known report."""

    def __init__(self, report_name: str):
        self.report_name = report_name
        super().__init__(f"invalid report type, you entered {report_name}")


class IssueFetchError(SnitchError):
    """Raised when issues cannot be retrieved from the gh CLI."""
