"""GitHub web URLs linked from markdown reports."""

from urllib.parse import quote

from ..github_client.models import Assignee, Label, Milestone

GITHUB_URL = "https://github.com"


def repo_url(repo: str | None) -> str:
    if not repo:
        return GITHUB_URL
    return f"{GITHUB_URL}/{repo}"


def _issue_search_url(repo: str | None, query: str) -> str:
    return f"{repo_url(repo)}/issues?q={quote(query, safe='')}"


def label_url(repo: str | None, label: Label) -> str:
    """Issue search for everything carrying ``label``."""
    return _issue_search_url(repo, f'label:"{label.name}"')


def milestone_url(repo: str | None, milestone: Milestone) -> str:
    """Issue search for everything scheduled in ``milestone``."""
    return _issue_search_url(repo, f'milestone:"{milestone.title}"')


def assignee_url(assignee: Assignee) -> str:
    """Profile page of ``assignee``."""
    return f"{GITHUB_URL}/{quote(assignee.profile_handle)}"
