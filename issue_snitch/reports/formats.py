"""Output formats for issue reports.

Every mode-dependent piece of a report (indentation, line breaks, escaping,
links and headings) lives behind :class:`OutputFormat`. The formatters pick
one implementation per render via :func:`get_output_format` and never test
the file type themselves.
"""

import html
import re
from abc import ABC, abstractmethod

from ..github_client.models import Assignee, Label, Milestone
from . import urls

# Characters that markdown renderers treat as inline syntax
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]])")


class OutputFormat(ABC):
    """Per-mode rendering capability shared by all report formatters."""

    indent: str
    line_break: str
    ellipsis: str
    # Columns the ellipsis occupies once rendered
    ellipsis_width: int

    def __init__(self, repo: str | None = None):
        self.repo = repo

    @abstractmethod
    def escape(self, text: str) -> str:
        """Escape text so that it renders literally."""

    @abstractmethod
    def issue_title(self, title: str, url: str, number: int) -> str:
        """Render an already escaped title, linked to its issue if supported."""

    @abstractmethod
    def label(self, label: Label) -> str:
        pass

    @abstractmethod
    def assignee(self, assignee: Assignee) -> str:
        pass

    @abstractmethod
    def milestone(self, milestone: Milestone, text: str) -> str:
        pass

    @abstractmethod
    def heading(self, text: str) -> str:
        """Render the top-level report heading, followed by a blank line."""

    @abstractmethod
    def bucket_heading(self, text: str, level: int = 2) -> str:
        """Render a grouping heading, followed by a blank line."""


class TextFormat(OutputFormat):
    """Plain text output."""

    indent = "    "
    line_break = "\n"
    ellipsis = "..."
    ellipsis_width = 3

    def escape(self, text: str) -> str:
        return text

    def issue_title(self, title: str, url: str, number: int) -> str:
        return title

    def label(self, label: Label) -> str:
        return label.name

    def assignee(self, assignee: Assignee) -> str:
        return assignee.display_name

    def milestone(self, milestone: Milestone, text: str) -> str:
        return text

    def heading(self, text: str) -> str:
        return f"{text}\n\n"

    def bucket_heading(self, text: str, level: int = 2) -> str:
        underline = "=" if level <= 2 else "-"
        return f"{text}\n{underline * len(text)}\n\n"


class MarkdownFormat(OutputFormat):
    """Markdown output with inline HTML for links and colors."""

    indent = "&nbsp;" * 4
    line_break = "<br>"
    ellipsis = "&hellip;"
    ellipsis_width = 1

    def escape(self, text: str) -> str:
        return html.escape(_MARKDOWN_SPECIAL.sub(r"\\\1", text))

    def issue_title(self, title: str, url: str, number: int) -> str:
        return (
            f'<a href="{html.escape(url)}" target="_blank" '
            f'title="link to issue {number}">{title}</a>'
        )

    def label(self, label: Label) -> str:
        return (
            f'<a href="{urls.label_url(self.repo, label)}" target="_blank">'
            f'<span style="color: #{html.escape(label.color)};">'
            f"{self.escape(label.name)}</span></a>"
        )

    def assignee(self, assignee: Assignee) -> str:
        return (
            f'<a href="{urls.assignee_url(assignee)}" target="_blank">'
            f"{self.escape(assignee.display_name)}</a>"
        )

    def milestone(self, milestone: Milestone, text: str) -> str:
        return (
            f'<a href="{urls.milestone_url(self.repo, milestone)}" target="_blank">'
            f"{self.escape(text)}</a>"
        )

    def heading(self, text: str) -> str:
        if self.repo:
            return (
                f'<h1><a href="{urls.repo_url(self.repo)}" target="_blank">'
                f"{self.escape(text)}</a></h1>\n\n"
            )
        return f"<h1>{self.escape(text)}</h1>\n\n"

    def bucket_heading(self, text: str, level: int = 2) -> str:
        return f"<h{level}>{self.escape(text)}</h{level}>\n\n"


OUTPUT_FORMATS: dict[str, type[OutputFormat]] = {
    "txt": TextFormat,
    "md": MarkdownFormat,
}


def get_output_format(file_type: str, repo: str | None = None) -> OutputFormat:
    """Return the output format for ``file_type`` ('txt' or 'md').

    Raises:
        ValueError: If the file type is not supported
    """
    try:
        format_class = OUTPUT_FORMATS[file_type]
    except KeyError:
        raise ValueError(
            f"Unsupported file type '{file_type}'. "
            f"Use one of: {', '.join(OUTPUT_FORMATS)}"
        ) from None
    return format_class(repo=repo)
