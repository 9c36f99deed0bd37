"""GitHub client package for issue retrieval through the gh CLI."""

from .client import GhCliClient, parse_issues
from .models import Assignee, Issue, Label, Milestone

__all__ = [
    "GhCliClient",
    "parse_issues",
    "Assignee",
    "Issue",
    "Label",
    "Milestone",
]
