"""Test configuration and fixtures."""

from collections.abc import Callable
from typing import Any

import pytest

from issue_snitch.config import ReportConfig
from issue_snitch.github_client.models import Assignee, Issue, Label, Milestone

IssueFactory = Callable[..., Issue]


@pytest.fixture
def make_issue() -> IssueFactory:
    """Build issues with sensible defaults; label/assignee names as strings."""

    def _make_issue(
        number: int = 1,
        title: str = "Fix bug",
        state: str = "open",
        labels: list[str] | None = None,
        assignees: list[str] | None = None,
        milestone: str | None = None,
        due_on: str | None = None,
        url: str = "u",
    ) -> Issue:
        return Issue(
            number=number,
            title=title,
            state=state,
            url=url,
            labels=[Label(name=name, color="ff0000") for name in labels or []],
            assignees=[Assignee(login=login) for login in assignees or []],
            milestone=(
                Milestone(title=milestone, dueOn=due_on) if milestone else None
            ),
        )

    return _make_issue


@pytest.fixture
def txt_config() -> ReportConfig:
    return ReportConfig(file_type="txt", max_length=80)


@pytest.fixture
def md_config() -> ReportConfig:
    return ReportConfig(file_type="md", max_length=80, repo="octo/repo")


@pytest.fixture
def gh_payload() -> list[dict[str, Any]]:
    """Issue list as printed by gh issue list --json."""
    return [
        {
            "number": 12,
            "title": "Crash on start",
            "url": "https://github.com/octo/repo/issues/12",
            "state": "OPEN",
            "labels": [
                {"id": "LA_1", "name": "bug", "color": "d73a4a", "description": ""}
            ],
            "milestone": {
                "number": 1,
                "title": "v1.0",
                "description": "",
                "dueOn": "2024-06-30T00:00:00Z",
            },
            "assignees": [{"id": "U_1", "login": "octocat", "name": "The Octocat"}],
        },
        {
            "number": 7,
            "title": "Document flags",
            "url": "https://github.com/octo/repo/issues/7",
            "state": "CLOSED",
            "labels": [],
            "milestone": None,
            "assignees": [],
        },
    ]
