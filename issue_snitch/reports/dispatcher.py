"""Select and run one report by name."""

import logging
from collections.abc import Callable, Sequence

from ..config import ReportConfig
from ..exceptions import InvalidReportTypeError
from ..github_client.models import Issue
from .formats import OutputFormat, get_output_format
from .grouping import (
    assignee_report,
    label_report,
    milestone_label_report,
    milestone_report,
)
from .issues import issues_report

logger = logging.getLogger(__name__)

ReportFunc = Callable[[ReportConfig, Sequence[Issue], OutputFormat | None], str]

REPORTS: dict[str, ReportFunc] = {
    "list": issues_report,
    "milestone": milestone_report,
    "milestone-label": milestone_label_report,
    "label": label_report,
    "assignee": assignee_report,
}


def get_report(report_name: str) -> ReportFunc:
    """Look up a report function.

    Raises:
        InvalidReportTypeError: If no report has that name
    """
    try:
        return REPORTS[report_name]
    except KeyError:
        raise InvalidReportTypeError(report_name) from None


def build_report(config: ReportConfig, issues: Sequence[Issue]) -> str:
    """Render the configured report, with its heading when one applies.

    Raises:
        InvalidReportTypeError: If the configured report name is unknown
        NoIssuesToReportError: If there are no issues to render
    """
    report = get_report(config.report_name)
    output_format = get_output_format(config.file_type, config.repo)
    logger.debug(
        f"Rendering '{config.report_name}' report for {len(issues)} issues "
        f"as {config.file_type}"
    )

    output = ""
    if not config.no_heading and config.heading:
        output += output_format.heading(config.heading)
    output += report(config, issues, output_format)
    return output
