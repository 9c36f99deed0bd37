"""GitHub issue retrieval through the gh CLI."""

import logging
import subprocess

from pydantic import TypeAdapter, ValidationError

from ..config import ReportConfig
from ..exceptions import IssueFetchError
from .models import Issue

logger = logging.getLogger(__name__)

ISSUE_FIELDS = "number,title,labels,milestone,state,assignees,url"

_issue_list_adapter = TypeAdapter(list[Issue])


def parse_issues(payload: str) -> list[Issue]:
    """Validate a ``gh issue list`` JSON payload into issue models.

    Args:
        payload: JSON array as printed by gh

    Returns:
        Issues in the order gh listed them

    Raises:
        IssueFetchError: If the payload is not a valid issue list
    """
    try:
        return _issue_list_adapter.validate_json(payload)
    except ValidationError as e:
        raise IssueFetchError(f"Invalid issue data from gh: {e}") from e


class GhCliClient:
    """Runs ``gh issue list`` once and returns the parsed issues."""

    def __init__(self, config: ReportConfig, executable: str = "gh"):
        self.config = config
        self.executable = executable

    def build_command(self) -> list[str]:
        """Build the gh argument list for the configured fetch."""
        command = [
            self.executable,
            "issue",
            "list",
            "-L",
            str(self.config.max_issues),
            "--state",
            self.config.state,
            "--json",
            ISSUE_FIELDS,
        ]
        if self.config.repo:
            command.extend(["-R", self.config.repo])
        return command

    def fetch_issues(self) -> list[Issue]:
        """Fetch issues from GitHub.

        Returns:
            Parsed issues

        Raises:
            IssueFetchError: If gh is missing, fails, or prints invalid JSON
        """
        command = self.build_command()
        logger.debug(f"Running gh command: {' '.join(command)}")
        try:
            result = subprocess.run(
                command, capture_output=True, text=True, check=False
            )
        except FileNotFoundError as e:
            raise IssueFetchError(
                f"{self.executable} not found. Install the GitHub CLI to continue."
            ) from e

        if result.returncode != 0:
            stderr = result.stderr.strip() or f"exit code {result.returncode}"
            raise IssueFetchError(f"gh issue list failed: {stderr}")

        issues = parse_issues(result.stdout)
        logger.info(f"Fetched {len(issues)} issues")
        return issues
