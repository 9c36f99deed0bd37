"""Pydantic models for GitHub issue data.

These models map to the JSON emitted by
``gh issue list --json number,title,labels,milestone,state,assignees,url``.
CLI Reference: https://cli.github.com/manual/gh_issue_list
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Label(BaseModel):
    """GitHub label attached to an issue."""

    name: str = Field(..., description="Name of the label (string)")
    color: str = Field(
        ..., description="Hexadecimal color code without leading # (string)"
    )


class Milestone(BaseModel):
    """GitHub milestone an issue is scheduled for."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description="Title of the milestone (string)")
    due_on: str | None = Field(
        None,
        alias="dueOn",
        description="Due date as an ISO 8601 date-time string (optional)",
    )

    @property
    def due_date(self) -> str | None:
        """Date portion (YYYY-MM-DD) of the due date, if any."""
        if not self.due_on:
            return None
        return self.due_on[:10]


class Assignee(BaseModel):
    """GitHub user an issue is assigned to.

    ``gh`` reports both the account login and the profile name; the name is
    frequently empty, so rendering falls back to the login.
    """

    login: str = Field("", description="GitHub username/login (string)")
    name: str = Field("", description="Profile display name (string)")

    @property
    def display_name(self) -> str:
        return self.name or self.login

    @property
    def profile_handle(self) -> str:
        return self.login or self.name


class Issue(BaseModel):
    """GitHub issue as returned by ``gh issue list``."""

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    url: str = Field(..., description="Web URL of the issue (string)")
    state: Literal["open", "closed"] = Field(
        ..., description="Current state: 'open' or 'closed' (string)"
    )
    labels: list[Label] = Field(
        default_factory=list, description="Labels attached to the issue"
    )
    milestone: Milestone | None = Field(
        None, description="Milestone the issue belongs to (optional)"
    )
    assignees: list[Assignee] = Field(
        default_factory=list, description="Users assigned to the issue"
    )

    @field_validator("state", mode="before")
    @classmethod
    def normalize_state(cls, v: object) -> object:
        """gh reports state in upper case (OPEN, CLOSED)."""
        if isinstance(v, str):
            return v.lower()
        return v
