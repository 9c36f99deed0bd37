"""Issue list report: one formatted block per issue."""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from ..config import ReportConfig
from ..exceptions import NoIssuesToReportError
from ..github_client.models import Issue
from .fields import (
    format_assignees,
    format_labels,
    format_milestone,
    format_number,
    format_state,
)
from .formats import OutputFormat, get_output_format
from .title import format_title

ISSUE_SEPARATOR = "\n\n"


class DisplayOptions(BaseModel):
    """Which optional fields appear in each issue block."""

    model_config = ConfigDict(frozen=True)

    show_state: bool = True
    show_labels: bool = True
    show_assignees: bool = True
    show_milestone: bool = True


class ReportableIssue(BaseModel):
    """Formatted fields of one issue, ready to concatenate."""

    state: str
    number: str
    title: str
    labels: str
    assignees: str
    milestone: str


def map_reportable_issue(
    config: ReportConfig, issue: Issue, output_format: OutputFormat
) -> ReportableIssue:
    """Format every field of ``issue``."""
    return ReportableIssue(
        state=format_state(config, issue.state),
        number=format_number(issue.number),
        title=format_title(config, issue.title, issue.url, issue.number, output_format),
        labels=format_labels(issue.labels, output_format),
        assignees=format_assignees(issue.assignees, output_format),
        milestone=format_milestone(issue.milestone, output_format),
    )


def format_reportable_issue(
    reportable: ReportableIssue, options: DisplayOptions, output_format: OutputFormat
) -> str:
    """Concatenate the fields in report order, honoring ``options``."""
    parts = []
    if options.show_state:
        parts.append(reportable.state)
    parts.append(reportable.number)
    parts.append(reportable.title)
    if options.show_labels:
        parts.append(reportable.labels)
        assignees = reportable.assignees
    else:
        parts.append(output_format.indent)
        assignees = reportable.assignees.strip()
    if options.show_assignees:
        parts.append(assignees)
    if options.show_milestone:
        parts.append(reportable.milestone)
    return "".join(parts)


def render_issues(
    config: ReportConfig,
    issues: Sequence[Issue],
    options: DisplayOptions | None = None,
    output_format: OutputFormat | None = None,
) -> str:
    """Render ``issues`` in input order, separated by blank lines.

    Raises:
        NoIssuesToReportError: If ``issues`` is empty
    """
    if not issues:
        raise NoIssuesToReportError()
    if options is None:
        options = DisplayOptions()
    if output_format is None:
        output_format = get_output_format(config.file_type, config.repo)

    blocks = [
        format_reportable_issue(
            map_reportable_issue(config, issue, output_format), options, output_format
        )
        for issue in issues
    ]
    return ISSUE_SEPARATOR.join(blocks)


def issues_report(
    config: ReportConfig,
    issues: Sequence[Issue],
    output_format: OutputFormat | None = None,
) -> str:
    """Ungrouped list of all issues."""
    return render_issues(config, issues, DisplayOptions(), output_format)
