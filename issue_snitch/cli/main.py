"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .report import report

# Load SNITCH_* settings from a .env file
load_dotenv()

app = typer.Typer(
    name="snitch",
    help="Render GitHub issue reports as plain text or markdown",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="report", context_settings={"help_option_names": ["-h", "--help"]})(
    report
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from issue_snitch import __version__

    console.print(f"Issue Snitch v{__version__}")


if __name__ == "__main__":
    app()
