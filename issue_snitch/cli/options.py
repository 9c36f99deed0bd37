"""Standardized CLI option definitions for the report command.

Every option can also be set through a ``SNITCH_*`` environment variable,
including from a ``.env`` file in the working directory.
"""

import typer

# Report selection and layout
REPORT_NAME_OPTION = typer.Option(
    "list",
    "--name",
    "-n",
    envvar="SNITCH_REPORT",
    help="Report: list, milestone, milestone-label, label or assignee",
)

FILE_TYPE_OPTION = typer.Option(
    "txt",
    "--file-type",
    "-t",
    envvar="SNITCH_FILE_TYPE",
    help="Output flavor: txt or md",
)

MAX_LENGTH_OPTION = typer.Option(
    80, "--max-length", envvar="SNITCH_MAX_LENGTH", help="Maximum line length"
)

CROP_OPTION = typer.Option(
    False,
    "--crop/--no-crop",
    envvar="SNITCH_CROP",
    help="Crop titles longer than the line length",
)

WRAP_OPTION = typer.Option(
    False,
    "--wrap/--no-wrap",
    envvar="SNITCH_WRAP",
    help="Wrap titles longer than the line length (crop wins if both are set)",
)

OPEN_MARK_OPTION = typer.Option(
    "✖", "--open-mark", envvar="SNITCH_OPEN_MARK", help="Mark shown for open issues"
)

CLOSED_MARK_OPTION = typer.Option(
    "✔",
    "--closed-mark",
    envvar="SNITCH_CLOSED_MARK",
    help="Mark shown for closed issues",
)

# Heading options
NO_HEADING_OPTION = typer.Option(
    False, "--no-heading", envvar="SNITCH_NO_HEADING", help="Omit the report heading"
)

HEADING_OPTION = typer.Option(
    "", "--heading", envvar="SNITCH_HEADING", help="Report heading text"
)

# Fetch options - passed through to gh issue list
REPO_OPTION = typer.Option(
    None,
    "--repo",
    "-r",
    envvar="SNITCH_REPO",
    help="GitHub repository as OWNER/REPO (defaults to the current one)",
)

MAX_ISSUES_OPTION = typer.Option(
    100, "--max-issues", envvar="SNITCH_MAX_ISSUES", help="Maximum issues to fetch"
)

STATE_OPTION = typer.Option(
    "open",
    "--state",
    "-s",
    envvar="SNITCH_STATE",
    help="Issue state: open, closed, or all",
)

# Input/output options
INPUT_OPTION = typer.Option(
    None,
    "--input",
    "-i",
    help="Read issues from a saved gh JSON file instead of calling gh",
)

OUTPUT_OPTION = typer.Option(
    None, "--output", "-o", help="Output file path (default: print to stdout)"
)

DEBUG_OPTION = typer.Option(
    False,
    "--debug",
    envvar="SNITCH_DEBUG",
    help="Log the configuration and gh command, then exit without fetching",
)
