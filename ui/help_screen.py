"""Help screen widget showing keyboard shortcuts and input formats."""
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static
from textual.containers import VerticalScroll
from textual.binding import Binding
from textual import events


class HelpScreen(Screen):
    """Modal screen showing keyboard shortcuts."""

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
            yield Static("Keyboard Shortcuts", id="help_title")
            yield Static(self.get_help_text(), id="help_content")

    def get_help_text(self) -> str:
        """Get formatted help text."""
        return """[bold]Inspect[/bold]
p             Inspect a date
              • Shows ISO 8601, UTC milliseconds, leap year
              • Shows the angle between the clock hands (UTC)
n             Inspect the current instant
s             Measure a span between two dates
              • Enter the start date, then the end date
              • Shown as HH:mm:ss.sss, order does not matter

[bold]Accepted Formats[/bold]
ISO 8601      2016-01-19T16:07:37+00:00, 2016-01-19T08:07:37Z, 2016-01-19
RFC 2822      Tue, 26 Jan 2016 13:48:02 GMT
              Sun, 17 May 1998 03:00:00 GMT+01
Free-form     December 17, 1995 03:24:00
              • Dates without an offset are read as UTC
              • Set TDATE_NAIVE_OFFSET (minutes) to change that

[bold]General[/bold]
Esc           Cancel the current prompt
h             Show this help
q             Quit

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
