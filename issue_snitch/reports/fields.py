"""Formatters for the individual fields of a report line."""

from typing import Literal

from ..config import ReportConfig
from ..github_client.models import Assignee, Label, Milestone
from .formats import OutputFormat

NO_MILESTONE = "no milestone"
NO_LABELS = "no labels"
NO_ASSIGNEES = "no assignees"


def format_state(config: ReportConfig, state: Literal["open", "closed"]) -> str:
    """Mark glyph plus trailing space for an issue state."""
    marks = {"open": config.open_mark, "closed": config.closed_mark}
    return f"{marks[state]} "


def format_number(number: int) -> str:
    return f"#{number}: "


def format_labels(labels: list[Label], output_format: OutputFormat) -> str:
    if not labels:
        return f"{output_format.indent}[ {NO_LABELS} ] "
    names = ", ".join(output_format.label(label) for label in labels)
    return f"{output_format.indent}[ {names} ] "


def format_assignees(assignees: list[Assignee], output_format: OutputFormat) -> str:
    # Not indented: it always follows the labels block on the same line
    if not assignees:
        return f"[ {NO_ASSIGNEES} ]"
    names = ", ".join(output_format.assignee(assignee) for assignee in assignees)
    return f"[ {names} ]"


def milestone_text(milestone: Milestone) -> str:
    """Milestone title with its due date in parentheses, when set."""
    if milestone.due_date:
        return f"{milestone.title} ({milestone.due_date})"
    return milestone.title


def format_milestone(milestone: Milestone | None, output_format: OutputFormat) -> str:
    if milestone is None:
        return f" {NO_MILESTONE}"
    return f" {output_format.milestone(milestone, milestone_text(milestone))}"
