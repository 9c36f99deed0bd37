"""Tests for grouped reports."""

import re
from collections.abc import Callable

import pytest

from issue_snitch.config import ReportConfig
from issue_snitch.exceptions import NoIssuesToReportError
from issue_snitch.github_client.models import Issue
from issue_snitch.reports.grouping import (
    assignee_keys,
    assignee_report,
    group_issues,
    label_keys,
    label_report,
    milestone_keys,
    milestone_label_report,
    milestone_report,
)

IssueFactory = Callable[..., Issue]

ISSUE_LINE = re.compile(r"#\d+: ")


class TestGroupIssues:
    """Test bucketing."""

    def test_first_seen_order_and_fan_out(self, make_issue: IssueFactory) -> None:
        """Test buckets keep first-seen order and repeat multi-label issues."""
        issues = [
            make_issue(number=1, labels=["ui"]),
            make_issue(number=2, labels=["bug", "ui"]),
            make_issue(number=3),
            make_issue(number=4, labels=["bug"]),
        ]

        buckets = group_issues(issues, label_keys)

        assert list(buckets) == ["ui", "bug", "no labels"]
        assert [i.number for i in buckets["ui"]] == [1, 2]
        assert [i.number for i in buckets["bug"]] == [2, 4]
        assert [i.number for i in buckets["no labels"]] == [3]

    def test_repeated_key_counts_once(self, make_issue: IssueFactory) -> None:
        """Test an issue listing the same label twice lands once."""
        buckets = group_issues([make_issue(labels=["bug", "bug"])], label_keys)
        assert len(buckets["bug"]) == 1

    def test_placeholder_keys(self, make_issue: IssueFactory) -> None:
        """Test issues without a value get the placeholder key."""
        issue = make_issue()
        assert milestone_keys(issue) == ["no milestone"]
        assert label_keys(issue) == ["no labels"]
        assert assignee_keys(issue) == ["no assignees"]


class TestLabelReport:
    """Test the by-label report."""

    def test_shared_label(
        self, txt_config: ReportConfig, make_issue: IssueFactory
    ) -> None:
        """Test two issues sharing a label render under one heading."""
        issues = [
            make_issue(number=1, title="First", labels=["bug"]),
            make_issue(number=2, title="Second", labels=["bug"]),
        ]

        assert label_report(txt_config, issues) == (
            "bug\n===\n\n"
            "✖ #1: First\n    [ no assignees ] no milestone\n\n"
            "✖ #2: Second\n    [ no assignees ] no milestone"
        )

    def test_fan_out_count(
        self, txt_config: ReportConfig, make_issue: IssueFactory
    ) -> None:
        """Test issue count equals input plus one per extra label."""
        issues = [
            make_issue(number=1, labels=["bug", "ui", "docs"]),
            make_issue(number=2, labels=["bug"]),
            make_issue(number=3),
        ]
        output = label_report(txt_config, issues)
        assert len(ISSUE_LINE.findall(output)) == 3 + 2

    def test_markdown_headings(
        self, md_config: ReportConfig, make_issue: IssueFactory
    ) -> None:
        """Test markdown bucket headings."""
        output = label_report(md_config, [make_issue(labels=["bug"])])
        assert output.startswith("<h2>bug</h2>\n\n")


class TestMilestoneReport:
    """Test the by-milestone report."""

    def test_buckets_and_hidden_milestone(
        self, txt_config: ReportConfig, make_issue: IssueFactory
    ) -> None:
        """Test milestone buckets in first-seen order without milestone fields."""
        issues = [
            make_issue(number=1, milestone="v2"),
            make_issue(number=2),
            make_issue(number=3, milestone="v1"),
            make_issue(number=4, milestone="v2"),
        ]

        output = milestone_report(txt_config, issues)

        assert output.index("v2\n==") < output.index("no milestone\n===")
        assert output.index("no milestone\n===") < output.index("v1\n==")
        assert " no milestone" not in output
        assert ISSUE_LINE.findall(output) == ["#1: ", "#4: ", "#2: ", "#3: "]
        assert not output.endswith("\n")


class TestAssigneeReport:
    """Test the by-assignee report."""

    def test_fan_out_and_hidden_assignees(
        self, txt_config: ReportConfig, make_issue: IssueFactory
    ) -> None:
        """Test shared issues repeat per assignee with assignees hidden."""
        issues = [
            make_issue(number=1, assignees=["alice", "bob"]),
            make_issue(number=2),
        ]

        output = assignee_report(txt_config, issues)

        assert output.startswith("alice\n=====\n\n")
        assert "bob\n===\n\n" in output
        assert "no assignees\n============\n\n" in output
        assert "[ alice" not in output
        assert ISSUE_LINE.findall(output) == ["#1: ", "#1: ", "#2: "]


class TestMilestoneLabelReport:
    """Test the nested milestone then label report."""

    def test_nested_buckets(
        self, txt_config: ReportConfig, make_issue: IssueFactory
    ) -> None:
        """Test labels are grouped independently inside each milestone."""
        issues = [
            make_issue(number=1, milestone="v1", labels=["bug"]),
            make_issue(number=2, milestone="v2", labels=["ui"]),
            make_issue(number=3, milestone="v1", labels=["ui", "bug"]),
        ]

        output = milestone_label_report(txt_config, issues)

        assert output == (
            "v1\n==\n\n"
            "bug\n---\n\n"
            "✖ #1: Fix bug\n    [ no assignees ]\n\n"
            "✖ #3: Fix bug\n    [ no assignees ]\n\n"
            "ui\n--\n\n"
            "✖ #3: Fix bug\n    [ no assignees ]\n\n"
            "v2\n==\n\n"
            "ui\n--\n\n"
            "✖ #2: Fix bug\n    [ no assignees ]"
        )


class TestEmptyGroupedReports:
    """Test grouped reports reject empty input."""

    @pytest.mark.parametrize(
        "report",
        [milestone_report, label_report, assignee_report, milestone_label_report],
    )
    def test_empty(self, txt_config: ReportConfig, report: Callable) -> None:
        """Test an empty list raises NoIssuesToReportError."""
        with pytest.raises(NoIssuesToReportError):
            report(txt_config, [])
