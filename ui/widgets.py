"""Custom UI widgets for the naturaltime explorer."""
from datetime import datetime
from typing import List, Optional

from rich.markup import escape
from textual.widgets import Static

from config import config
from models import MatchResult
from utils.time_utils import format_duration


def format_results(
    expression: str,
    best: Optional[datetime],
    matches: List[MatchResult],
    display_format: Optional[str] = None,
) -> str:
    """
    Render resolution results as Textual markup.

    Args:
        expression: The expression that was resolved
        best: Single best date, or None
        matches: Match records for the expression
        display_format: strftime format (uses config.display_format if None)

    Returns:
        Markup string for a Static widget
    """
    fmt = display_format or config.display_format

    def show(moment: datetime) -> str:
        return moment.strftime(fmt)

    lines = [f"[bold]{escape(expression)}[/bold]", ""]
    if best is None:
        lines.append("[dim]Best:[/dim]  [red]no date found[/red]")
    else:
        lines.append(f"[dim]Best:[/dim]  {show(best)}")

    if not matches:
        lines.append("[dim]No matches[/dim]")
        return "\n".join(lines)

    lines.append("")
    for number, match in enumerate(matches, start=1):
        if match.start is not None and match.end is not None:
            span = format_duration(match.end - match.start)
            lines.append(
                f"[bold]{number}.[/bold] {show(match.start)} [dim]→[/dim] {show(match.end)} [dim]({span})[/dim]"
            )
        else:
            lines.append(f"[bold]{number}.[/bold] {show(match.date)}")
    return "\n".join(lines)


def format_error(message: str) -> str:
    """Build markup for an error line. The message is shown literally."""
    return f"[red]{escape(message)}[/red]"

class ResultsPanel(Static):
    """Panel showing the latest resolution results."""

    DEFAULT_CSS = """
    ResultsPanel {
        height: auto;
        padding: 1 2;
        color: #e2e8f0;
    }
    """

    def show_results(self, expression: str, best: Optional[datetime], matches: List[MatchResult]) -> None:
        """Render results for an expression."""
        self.update(format_results(expression, best, matches))

    def show_error(self, message: str) -> None:
        """Render an error line."""
        self.update(format_error(message))


class CenteredFooter(Static):
    """Custom footer with centered content."""

    def __init__(self):
        super().__init__()
        self.update("[bold]F1[/bold] [dim]for Help  •  [/dim][bold]Ctrl+L[/bold] [dim]to Clear  •  [/dim][bold]Ctrl+Q[/bold] [dim]to Quit[/dim]")

    DEFAULT_CSS = """
    CenteredFooter {
        background: transparent;
        color: #0abdc6;
        dock: bottom;
        height: 1;
        text-align: center;
        border: thick #0abdc6;
    }
    """
