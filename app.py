"""Interactive TUI explorer for natural language date expressions."""
from typing import Optional, Union

from textual.app import App, ComposeResult
from textual.widgets import Header, Input
from textual.containers import Container
from textual.binding import Binding

from business_logic.expression_resolver import ExpressionResolver
from ui.help_screen import HelpScreen
from ui.widgets import CenteredFooter, ResultsPanel


def parse_reference_input(value: str) -> Optional[Union[int, str]]:
    """
    Interpret the reference input box.

    Args:
        value: Raw input text

    Returns:
        None when empty, epoch milliseconds for plain digits, otherwise the text
    """
    value = value.strip()
    if not value:
        return None
    if value.lstrip("-").isdigit():
        return int(value)
    return value


class NaturalTimeApp(App):
    """A terminal explorer for resolving natural language dates."""

    TITLE = "naturaltime"

    CSS = """
    Screen {
        background: #1a1a2e;
    }

    Header {
        background: #2d2d44;
        color: #0abdc6;
    }

    #input_container {
        height: auto;
        padding: 1;
        background: #1a1a2e;
    }

    #results {
        height: 1fr;
        overflow-y: auto;
        background: #1a1a2e;
    }

    Input {
        margin: 0 1;
        background: #2d2d44;
        color: #ffffff;
        border: tall #8b5cf6;
    }

    Input:focus {
        border: tall #0abdc6;
    }
    """

    BINDINGS = [
        Binding("f1", "show_help", "Help", show=False),
        Binding("ctrl+l", "clear", "Clear", show=False),
    ]

    def __init__(self, resolver: Optional[ExpressionResolver] = None):
        super().__init__()
        self.resolver = resolver or ExpressionResolver()

    def compose(self) -> ComposeResult:
        """Compose the UI."""
        yield Header()
        yield Container(
            Input(placeholder="Expression, e.g. tomorrow 9am-5pm", id="expression"),
            Input(placeholder="Reference (optional), e.g. 2024-01-01T00:00:00Z", id="reference"),
            id="input_container",
        )
        yield Container(ResultsPanel(id="results_panel"), id="results")
        yield CenteredFooter()

    def on_mount(self) -> None:
        """Focus the expression input."""
        self.query_one("#expression", Input).focus()

    def resolve_current(self) -> None:
        """Resolve the expression input against the reference input."""
        expression = self.query_one("#expression", Input).value
        reference_text = self.query_one("#reference", Input).value
        panel = self.query_one(ResultsPanel)

        if not expression.strip():
            panel.update("")
            return

        try:
            reference = parse_reference_input(reference_text)
            best = self.resolver.resolve_single_date(expression, reference)
            matches = self.resolver.resolve_date_ranges(expression, reference)
        except (ValueError, TypeError, OverflowError) as exc:
            panel.show_error(f"Invalid reference {reference_text!r}: {exc}")
            return

        panel.show_results(expression, best, matches)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter in either input."""
        self.resolve_current()

    def action_clear(self) -> None:
        """Clear inputs and results."""
        for input_widget in self.query(Input):
            input_widget.value = ""
        self.query_one(ResultsPanel).update("")
        self.query_one("#expression", Input).focus()

    def action_show_help(self) -> None:
        """Show the help screen."""
        self.push_screen(HelpScreen())


def main():
    """Run the application."""
    app = NaturalTimeApp()
    app.run()


if __name__ == "__main__":
    main()
