"""Report configuration model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

REPORT_NAMES = ("list", "milestone", "milestone-label", "label", "assignee")


class ReportConfig(BaseModel):
    """Settings for one report run.

    Assembled once by the CLI and never mutated while rendering. The report
    name is kept as a free-form string so that an unknown name reaches the
    dispatcher and is reported there.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    report_name: str = Field("list", description=f"One of: {', '.join(REPORT_NAMES)}")
    file_type: Literal["txt", "md"] = Field(
        "txt", description="Output flavor: plain text or markdown/HTML"
    )
    max_length: int = Field(80, gt=0, description="Maximum line length for titles")
    crop: bool = Field(False, description="Crop titles that exceed the line length")
    wrap: bool = Field(False, description="Wrap titles that exceed the line length")
    no_heading: bool = Field(False, description="Suppress the report heading")
    heading: str = Field("", description="Report heading text")
    repo: str | None = Field(
        None, description="Repository as OWNER/REPO (defaults to the current one)"
    )
    max_issues: int = Field(100, gt=0, description="Maximum number of issues to fetch")
    state: Literal["open", "closed", "all"] = Field(
        "open", description="Issue state to fetch"
    )
    debug: bool = Field(False, description="Log configuration and gh command, then exit")
    open_mark: str = Field("✖", description="Mark shown for open issues")
    closed_mark: str = Field("✔", description="Mark shown for closed issues")
