"""Issue title formatting: fit a title to the configured line length."""

import textwrap

from ..config import ReportConfig
from .formats import OutputFormat, get_output_format

# State mark, space, '#', ':' and space around the issue number
OFFSET = 5


def available_width(max_length: int, number: int) -> int:
    """Columns left for the title once the mark and number label are placed.

    May be zero or negative when the line length is very small.
    """
    return max_length - (OFFSET + len(str(abs(number))))


def crop_title(title: str, width: int, output_format: OutputFormat) -> str:
    """Truncate ``title`` so that it plus the ellipsis fits in ``width``.

    Markdown engines usually render the ``&hellip;`` entity as one glyph,
    so markdown keeps ``width - 1`` characters; plain text keeps
    ``width - 3`` to leave room for three dots.
    """
    keep = max(width - output_format.ellipsis_width, 0)
    return output_format.escape(title[:keep]) + output_format.ellipsis


def wrap_title(title: str, width: int, output_format: OutputFormat) -> str:
    """Greedy word wrap of ``title`` at ``width`` columns.

    Hyphenated words move to the next line whole; only a word longer than
    ``width`` is split.
    """
    lines = textwrap.wrap(
        title, width=max(width, 1), break_on_hyphens=False, break_long_words=True
    ) or [title]
    return output_format.line_break.join(output_format.escape(line) for line in lines)


def format_title(
    config: ReportConfig,
    title: str,
    url: str,
    number: int,
    output_format: OutputFormat | None = None,
) -> str:
    """Format an issue title for one report line.

    Cropping takes precedence over wrapping when both are enabled. A title
    that overflows with neither enabled is emitted whole.
    """
    if output_format is None:
        output_format = get_output_format(config.file_type, config.repo)

    width = available_width(config.max_length, number)
    overflows = len(title) > width

    if config.crop and overflows:
        text = crop_title(title, width, output_format)
    elif config.wrap and overflows:
        text = wrap_title(title, width, output_format)
    else:
        text = output_format.escape(title)

    return output_format.issue_title(text, url, number) + output_format.line_break
