"""CLI command for rendering issue reports."""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from ..config import ReportConfig
from ..exceptions import (
    InvalidReportTypeError,
    IssueFetchError,
    NoIssuesToReportError,
)
from ..github_client.client import GhCliClient, parse_issues
from ..github_client.models import Issue
from ..reports.dispatcher import build_report
from .options import (
    CLOSED_MARK_OPTION,
    CROP_OPTION,
    DEBUG_OPTION,
    FILE_TYPE_OPTION,
    HEADING_OPTION,
    INPUT_OPTION,
    MAX_ISSUES_OPTION,
    MAX_LENGTH_OPTION,
    NO_HEADING_OPTION,
    OPEN_MARK_OPTION,
    OUTPUT_OPTION,
    REPO_OPTION,
    REPORT_NAME_OPTION,
    STATE_OPTION,
    WRAP_OPTION,
)

logger = logging.getLogger(__name__)

# Status and errors go to stderr so stdout carries only the report
console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(debug: bool) -> None:
    """Send log records to stderr, at DEBUG level when debugging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def load_issues(config: ReportConfig, input_path: Path | None) -> list[Issue]:
    """Read issues from a saved gh payload, or fetch them with gh."""
    if input_path is not None:
        logger.debug(f"Reading issues from {input_path}")
        return parse_issues(input_path.read_text(encoding="utf-8"))
    return GhCliClient(config).fetch_issues()


def report(
    report_name: str = REPORT_NAME_OPTION,
    file_type: str = FILE_TYPE_OPTION,
    max_length: int = MAX_LENGTH_OPTION,
    crop: bool = CROP_OPTION,
    wrap: bool = WRAP_OPTION,
    open_mark: str = OPEN_MARK_OPTION,
    closed_mark: str = CLOSED_MARK_OPTION,
    no_heading: bool = NO_HEADING_OPTION,
    heading: str = HEADING_OPTION,
    repo: str | None = REPO_OPTION,
    max_issues: int = MAX_ISSUES_OPTION,
    state: str = STATE_OPTION,
    input_path: Path | None = INPUT_OPTION,
    output: Path | None = OUTPUT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Render a report of GitHub issues.

    Reports:
    - list: every issue in gh order
    - milestone: issues grouped by milestone
    - milestone-label: grouped by milestone, then by label
    - label: issues grouped by label
    - assignee: issues grouped by assignee

    Examples:
        snitch report --repo cli/cli --name label
        snitch report --repo cli/cli --file-type md --crop --heading "Open issues"
        gh issue list --json number,title,labels,milestone,state,assignees,url \\
            > issues.json && snitch report --input issues.json
    """
    configure_logging(debug)

    try:
        config = ReportConfig(
            report_name=report_name,
            file_type=file_type,
            max_length=max_length,
            crop=crop,
            wrap=wrap,
            open_mark=open_mark,
            closed_mark=closed_mark,
            no_heading=no_heading,
            heading=heading,
            repo=repo,
            max_issues=max_issues,
            state=state,
            debug=debug,
        )
    except ValidationError as e:
        console.print(f"❌ Invalid configuration: {e}", markup=False)
        raise typer.Exit(1)

    if config.debug:
        logger.debug(f"Report configuration: {config.model_dump()}")
        logger.debug(f"gh command: {' '.join(GhCliClient(config).build_command())}")
        raise typer.Exit(0)

    try:
        issues = load_issues(config, input_path)
        output_text = build_report(config, issues)
    except NoIssuesToReportError as e:
        console.print(f"❌ {e}", markup=False)
        raise typer.Exit(0)
    except (InvalidReportTypeError, IssueFetchError, OSError) as e:
        console.print(f"❌ Error: {e}", markup=False)
        raise typer.Exit(1)

    if output:
        output.write_text(output_text, encoding="utf-8")
        console.print(f"✅ Report written to {output}", markup=False)
    else:
        typer.echo(output_text, nl=False)
