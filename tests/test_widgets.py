"""Tests for report rendering."""
import pytest
from ui.widgets import ReportWidget, render_date_report, render_span_report


class TestRenderDateReport:
    """Test suite for render_date_report."""

    def test_contains_all_values(self, inspector):
        """Every computed value appears in the rendered text."""
        report = inspector.inspect("2012-06-15T21:00:00Z")
        text = render_date_report(report)
        assert "2012-06-15T21:00:00+00:00" in text
        assert str(report.utc_millis) in text
        assert "[green]yes[/green] (2012)" in text
        assert "1.5708 rad" in text
        assert "90.0°" in text
        assert "21:00 UTC" in text

    def test_common_year(self, inspector):
        """Common years are rendered dimmed."""
        report = inspector.inspect("2015-01-01T00:00:00Z")
        assert "[dim]no[/dim] (2015)" in render_date_report(report)


class TestRenderSpanReport:
    """Test suite for render_span_report."""

    def test_span(self, inspector):
        """The span and both endpoints are shown."""
        report = inspector.span("2000-01-01T10:00:00Z", "2000-01-01T11:00:00Z")
        text = render_span_report(report)
        assert "[yellow]01:00:00.000[/yellow]" in text
        assert "2000-01-01T10:00:00+00:00" in text
        assert "end before start" not in text

    def test_reversed_span_is_flagged(self, inspector):
        """A span whose end precedes its start says so."""
        report = inspector.span("2000-01-01T11:00:00Z", "2000-01-01T10:00:00Z")
        assert "end before start" in render_span_report(report)


class TestReportWidget:
    """Test suite for ReportWidget."""

    def test_init(self):
        """Widget starts without a report."""
        widget = ReportWidget()
        assert widget.report is None
        assert widget.id == "report"

