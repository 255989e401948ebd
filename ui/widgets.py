"""Custom UI widgets for tdate."""
from typing import Optional, Union
from textual.widgets import Static
from models import DateReport, SpanReport


def render_date_report(report: DateReport) -> str:
    """Format a DateReport as rich markup."""
    leap = "[green]yes[/green]" if report.leap_year else "[dim]no[/dim]"
    return f"""[bold]Input[/bold]             {report.source}
[bold]ISO 8601[/bold]          {report.iso}
[bold]UTC millis[/bold]        {report.utc_millis}
[bold]Leap year[/bold]         {leap} ({report.instant.year})
[bold]Clock hands[/bold]       {report.clock_angle:.4f} rad ({report.clock_angle_degrees:.1f}°) at {report.instant:%H:%M} UTC"""


def render_span_report(report: SpanReport) -> str:
    """Format a SpanReport as rich markup."""
    direction = " [dim](end before start)[/dim]" if report.is_negative else ""
    return f"""[bold]Start[/bold]             {report.start.iso}
[bold]End[/bold]               {report.end.iso}
[bold]Span[/bold]              [yellow]{report.span}[/yellow]{direction}"""


class ReportWidget(Static):
    """Panel showing the latest date or span report."""

    PLACEHOLDER = "[dim]Press[/dim] [bold]P[/bold] [dim]to inspect a date,[/dim] [bold]S[/bold] [dim]for a span,[/dim] [bold]N[/bold] [dim]for now[/dim]"

    def __init__(self, report: Optional[Union[DateReport, SpanReport]] = None):
        super().__init__(id="report")
        self.report = report

    def on_mount(self) -> None:
        """Render the initial report once mounted."""
        self.show(self.report)

    def show(self, report: Optional[Union[DateReport, SpanReport]], error: Optional[str] = None) -> None:
        """Replace the panel content with a report or an error line."""
        self.report = report
        if error:
            self.update(f"[red]{error}[/red]")
        elif isinstance(report, SpanReport):
            self.update(render_span_report(report))
        elif isinstance(report, DateReport):
            self.update(render_date_report(report))
        else:
            self.update(self.PLACEHOLDER)


class CenteredFooter(Static):
    """Custom footer with centered content."""

    def __init__(self):
        super().__init__()
        self.update("[dim]Press[/dim] [bold]H[/bold] [dim]for Help  •  [/dim][bold]Q[/bold] [dim]to Quit[/dim]")

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
