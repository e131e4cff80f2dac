"""Help screen listing example expressions and keys."""
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static
from textual.containers import VerticalScroll
from textual.binding import Binding
from textual import events


class HelpScreen(Screen):
    """Modal screen showing supported expressions and shortcuts."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close", show=False),
    ]

    CSS = """
    HelpScreen {
        align: center middle;
        background: rgba(26, 26, 46, 0.9);
    }

    #help_container {
        width: 80;
        height: auto;
        max-height: 90%;
        background: #2d2d44;
        border: thick #0abdc6;
        padding: 1 2;
    }

    #help_title {
        text-align: center;
        text-style: bold;
        color: #0abdc6;
        margin-bottom: 1;
    }

    #help_content {
        height: auto;
        overflow-y: auto;
        color: #e2e8f0;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the help screen."""
        with VerticalScroll(id="help_container"):
            yield Static("Expression Help", id="help_title")
            yield Static(self.get_help_text(), id="help_content")

    def get_help_text(self) -> str:
        """Get formatted help text."""
        return """[bold]Single dates[/bold]
tomorrow, yesterday, now
in 3 days, 2 weeks ago
January 20, 2024-12-25
3pm, 10:30

[bold]Ranges[/bold]
from Jan 1 to Jan 5, 2024
between 2pm and 4pm
today from 2pm to 4pm
tomorrow 9am-5pm
Monday to Friday

[bold]Reference[/bold]
The second input sets "now" for relative expressions.
  • Leave empty to use the current time
  • ISO format: 2024-01-01T00:00:00Z
  • Epoch milliseconds: 1704067200000

[bold]Keys[/bold]
Enter         Resolve the expression
Tab           Switch between inputs
Ctrl+L        Clear inputs and results
F1            Show this help
Ctrl+Q        Quit

[dim]Press Esc to close this help[/dim]"""

    def on_key(self, event: events.Key) -> None:
        """Handle key events - block all except Esc and arrow keys."""
        # Allow Esc (handled by binding) and arrow keys (for scrolling)
        if event.key not in ("escape", "up", "down"):
            event.prevent_default()
            event.stop()

    def action_dismiss(self) -> None:
        """Close the help screen."""
        self.dismiss()
