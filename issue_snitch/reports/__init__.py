"""Issue report rendering: field formatting, grouping and dispatch."""

from .dispatcher import REPORTS, build_report, get_report
from .formats import MarkdownFormat, OutputFormat, TextFormat, get_output_format
from .grouping import (
    assignee_report,
    group_issues,
    label_report,
    milestone_label_report,
    milestone_report,
)
from .issues import DisplayOptions, ReportableIssue, issues_report, render_issues
from .title import format_title

__all__ = [
    "REPORTS",
    "build_report",
    "get_report",
    "OutputFormat",
    "TextFormat",
    "MarkdownFormat",
    "get_output_format",
    "group_issues",
    "milestone_report",
    "label_report",
    "milestone_label_report",
    "assignee_report",
    "DisplayOptions",
    "ReportableIssue",
    "issues_report",
    "render_issues",
    "format_title",
]
