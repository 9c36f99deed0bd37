"""Grouped reports: bucket issues by milestone, label or assignee.

Buckets are insertion-ordered dicts from key to issues, so keys come out in
the order they are first seen in the input. An issue with several labels or
assignees lands in every matching bucket.
"""

import logging
from collections.abc import Callable, Sequence

from ..config import ReportConfig
from ..exceptions import NoIssuesToReportError
from ..github_client.models import Issue
from .fields import NO_ASSIGNEES, NO_LABELS, NO_MILESTONE
from .formats import OutputFormat, get_output_format
from .issues import DisplayOptions, render_issues

logger = logging.getLogger(__name__)

BUCKET_SEPARATOR = "\n\n"

KeyFunc = Callable[[Issue], list[str]]


def milestone_keys(issue: Issue) -> list[str]:
    if issue.milestone is None:
        return [NO_MILESTONE]
    return [issue.milestone.title]


def label_keys(issue: Issue) -> list[str]:
    if not issue.labels:
        return [NO_LABELS]
    return [label.name for label in issue.labels]


def assignee_keys(issue: Issue) -> list[str]:
    if not issue.assignees:
        return [NO_ASSIGNEES]
    return [assignee.display_name for assignee in issue.assignees]


def group_issues(issues: Sequence[Issue], key_func: KeyFunc) -> dict[str, list[Issue]]:
    """Partition ``issues`` into buckets in a single pass.

    Args:
        issues: Issues in report order
        key_func: Returns every bucket key an issue belongs to

    Returns:
        Mapping of key to issues, both in first-seen order
    """
    buckets: dict[str, list[Issue]] = {}
    for issue in issues:
        # dict.fromkeys drops a key repeated on the same issue
        for key in dict.fromkeys(key_func(issue)):
            buckets.setdefault(key, []).append(issue)
    return buckets


def render_buckets(
    buckets: dict[str, list[Issue]],
    render_bucket: Callable[[list[Issue]], str],
    output_format: OutputFormat,
    level: int = 2,
) -> str:
    """Render every bucket as its heading followed by its issues."""
    return BUCKET_SEPARATOR.join(
        output_format.bucket_heading(key, level) + render_bucket(bucket_issues)
        for key, bucket_issues in buckets.items()
    )


def _grouped_report(
    config: ReportConfig,
    issues: Sequence[Issue],
    key_func: KeyFunc,
    options: DisplayOptions,
    output_format: OutputFormat | None,
) -> str:
    if not issues:
        raise NoIssuesToReportError()
    if output_format is None:
        output_format = get_output_format(config.file_type, config.repo)
    buckets = group_issues(issues, key_func)
    logger.debug(f"Grouped {len(issues)} issues into {len(buckets)} buckets")
    return render_buckets(
        buckets,
        lambda bucket_issues: render_issues(
            config, bucket_issues, options, output_format
        ),
        output_format,
    )


def milestone_report(
    config: ReportConfig,
    issues: Sequence[Issue],
    output_format: OutputFormat | None = None,
) -> str:
    """Issues grouped by milestone."""
    return _grouped_report(
        config,
        issues,
        milestone_keys,
        DisplayOptions(show_milestone=False),
        output_format,
    )


def label_report(
    config: ReportConfig,
    issues: Sequence[Issue],
    output_format: OutputFormat | None = None,
) -> str:
    """Issues grouped by label; multi-label issues repeat per label."""
    return _grouped_report(
        config, issues, label_keys, DisplayOptions(show_labels=False), output_format
    )


def assignee_report(
    config: ReportConfig,
    issues: Sequence[Issue],
    output_format: OutputFormat | None = None,
) -> str:
    """Issues grouped by assignee; shared issues repeat per assignee."""
    return _grouped_report(
        config,
        issues,
        assignee_keys,
        DisplayOptions(show_assignees=False),
        output_format,
    )


def milestone_label_report(
    config: ReportConfig,
    issues: Sequence[Issue],
    output_format: OutputFormat | None = None,
) -> str:
    """Issues grouped by milestone, then by label within each milestone."""
    if not issues:
        raise NoIssuesToReportError()
    if output_format is None:
        output_format = get_output_format(config.file_type, config.repo)
    options = DisplayOptions(show_milestone=False, show_labels=False)

    def render_milestone(milestone_issues: list[Issue]) -> str:
        return render_buckets(
            group_issues(milestone_issues, label_keys),
            lambda label_issues: render_issues(
                config, label_issues, options, output_format
            ),
            output_format,
            level=3,
        )

    return render_buckets(
        group_issues(issues, milestone_keys), render_milestone, output_format
    )
