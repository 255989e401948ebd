"""Main TUI application for tdate."""
from typing import Optional
from textual.app import App, ComposeResult
from textual.widgets import Header, Static, Input
from textual.containers import Container
from textual.binding import Binding
from textual import events
from business_logic.date_inspector import DateInspector
from config import config
from models import DateReport
from ui.help_screen import HelpScreen
from ui.widgets import CenteredFooter, ReportWidget


class DateToolsApp(App):
    """A terminal date inspector."""

    TITLE = "tDate"

    CSS = f"""
    Screen {{
        background: {config.color_bg_dark};
    }}

    Header {{
        background: {config.color_bg_medium};
        color: {config.color_primary};
    }}

    #mode_header {{
        height: 3;
        content-align: center middle;
        background: {config.color_primary};
        color: #ffffff;
        text-style: bold;
    }}

    #report_container {{
        height: 1fr;
        padding: 1 2;
        overflow-y: auto;
        background: {config.color_bg_dark};
    }}

    ReportWidget {{
        height: auto;
        color: {config.color_text};
    }}

    #input_container {{
        height: auto;
        padding: 1;
        background: {config.color_bg_dark};
    }}

    Input {{
        margin: 0 1;
        background: {config.color_bg_medium};
        color: #ffffff;
        border: tall {config.color_secondary};
    }}

    Input:focus {{
        border: tall {config.color_primary};
    }}
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=False),
        Binding("h", "show_help", "Help", show=False),
        Binding("p", "inspect_date", "Inspect", show=False),
        Binding("s", "measure_span", "Span", show=False),
        Binding("n", "inspect_now", "Now", show=False),
    ]

    def __init__(self, inspector: Optional[DateInspector] = None):
        super().__init__()
        self.inspector = inspector or DateInspector()
        # Prompt state
        self.entering_date = False
        self.entering_span_start = False
        self.entering_span_end = False
        self.span_start: Optional[str] = None

    def compose(self) -> ComposeResult:
        """Compose the UI."""
        yield Header()
        yield Static(id="mode_header")
        yield Container(ReportWidget(), id="report_container")
        yield Container(id="input_container")
        yield CenteredFooter()

    def on_mount(self) -> None:
        """Set up the app after mounting."""
        self.update_mode_header()

    def update_mode_header(self) -> None:
        """Show which prompt is active."""
        header = self.query_one("#mode_header", Static)
        if self.entering_date:
            header.update("Inspect date")
        elif self.entering_span_start:
            header.update("Span: start date")
        elif self.entering_span_end:
            header.update(f"Span: end date (from {self.span_start})")
        else:
            header.update("Date inspector")

    def _prompt(self, placeholder: str) -> None:
        """Mount a fresh input widget and focus it."""
        container = self.query_one("#input_container")
        for input_widget in container.query(Input):
            input_widget.remove()
        input_widget = Input(placeholder=placeholder)
        container.mount(input_widget)
        input_widget.focus()
        self.update_mode_header()

    def show_report(self, report, error: Optional[str] = None) -> None:
        """Push a report (or an error) to the report panel."""
        self.query_one(ReportWidget).show(report, error)

    def action_show_help(self) -> None:
        """Show the help screen."""
        self.push_screen(HelpScreen())

    def action_inspect_date(self) -> None:
        """Prompt for a date to inspect."""
        self._clear_input_state()
        self.entering_date = True
        self._prompt("Enter date (2016-01-19T16:07:37Z, Tue, 26 Jan 2016 13:48:02 GMT)...")

    def action_measure_span(self) -> None:
        """Prompt for the start of a span."""
        self._clear_input_state()
        self.entering_span_start = True
        self._prompt("Enter start date...")

    def action_inspect_now(self) -> None:
        """Inspect the current instant."""
        report: DateReport = self.inspector.now()
        self.show_report(report)

    def _handle_date_input(self, value: str) -> None:
        """Handle input for inspecting a single date."""
        if value:
            report = self.inspector.inspect(value)
            if report is None:
                self.show_report(None, f"Could not parse date: {value}")
            else:
                self.show_report(report)
        self.entering_date = False

    def _handle_span_start_input(self, value: str) -> None:
        """Remember the span start and prompt for the end."""
        self.entering_span_start = False
        if not value:
            return
        if self.inspector.parse(value) is None:
            self.show_report(None, f"Could not parse start date: {value}")
            return
        self.span_start = value
        self.entering_span_end = True
        self.call_after_refresh(self._prompt, "Enter end date...")

    def _handle_span_end_input(self, value: str) -> None:
        """Handle input for the end of a span."""
        if value and self.span_start is not None:
            report = self.inspector.span(self.span_start, value)
            if report is None:
                self.show_report(None, f"Could not parse end date: {value}")
            else:
                self.show_report(report)
        self.entering_span_end = False
        self.span_start = None

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle input submission by dispatching to appropriate handler."""
        value = event.value.strip()

        if self.entering_date:
            self._handle_date_input(value)
        elif self.entering_span_start:
            self._handle_span_start_input(value)
        elif self.entering_span_end:
            self._handle_span_end_input(value)

        # Remove input widget
        event.input.remove()
        self.update_mode_header()

    def _clear_input_state(self) -> None:
        """Clear all input mode state flags."""
        self.entering_date = False
        self.entering_span_start = False
        self.entering_span_end = False
        self.span_start = None

    def on_key(self, event: events.Key) -> None:
        """Cancel an open prompt on escape."""
        focused = self.focused
        if isinstance(focused, Input):
            if event.key == "escape":
                focused.remove()
                self._clear_input_state()
                self.update_mode_header()
                event.prevent_default()
            return


def main():
    """Run the application."""
    app = DateToolsApp()
    app.run()


if __name__ == "__main__":
    main()
