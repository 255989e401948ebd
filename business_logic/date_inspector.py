"""Date inspection logic for tdate."""
import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional
from models import DateReport, SpanReport
from config import config
from utils.date_utils import (
    EPOCH,
    ParseError,
    clock_hand_angle,
    format_iso8601,
    format_time_span,
    is_leap_year,
    parse_iso8601_to_date,
    parse_rfc2822_to_utc_millis,
    to_utc_millis,
)

logger = logging.getLogger(__name__)


class DateInspector:
    """Parses user input and applies every date function to the result."""

    def __init__(self, naive_tz: Optional[tzinfo] = None):
        """
        Initialize DateInspector.

        Args:
            naive_tz: Zone for input without an offset (uses config.naive_tzinfo if None)
        """
        self.naive_tz = naive_tz if naive_tz is not None else config.naive_tzinfo

    def parse(self, input_str: str) -> Optional[datetime]:
        """
        Parse ISO 8601 or RFC 2822 input.

        ISO 8601 is tried first, so "2016-01-19" is never read as a free-form date.

        Args:
            input_str: Date string typed by the user

        Returns:
            Aware UTC datetime, or None if neither parser accepts the input
        """
        input_str = input_str.strip()
        if not input_str:
            return None

        try:
            return parse_iso8601_to_date(input_str, self.naive_tz).astimezone(timezone.utc)
        except ParseError:
            pass

        try:
            millis = parse_rfc2822_to_utc_millis(input_str, self.naive_tz)
        except ParseError as e:
            logger.debug("Rejected date input: %s", e)
            return None
        return EPOCH + timedelta(milliseconds=millis)

    def report(self, instant: datetime, source: str = "") -> DateReport:
        """Build a DateReport for an already-parsed instant."""
        return DateReport(
            source=source,
            instant=instant,
            utc_millis=to_utc_millis(instant),
            iso=format_iso8601(instant),
            leap_year=is_leap_year(instant),
            clock_angle=clock_hand_angle(instant),
        )

    def inspect(self, input_str: str) -> Optional[DateReport]:
        """Parse input and build its report, or None if it does not parse."""
        instant = self.parse(input_str)
        if instant is None:
            return None
        return self.report(instant, input_str.strip())

    def now(self) -> DateReport:
        """Report for the current instant."""
        instant = datetime.now(timezone.utc).replace(microsecond=0)
        return self.report(instant, "now")

    def span(self, start_str: str, end_str: str) -> Optional[SpanReport]:
        """
        Inspect two inputs and format the span between them.

        Returns:
            SpanReport, or None if either input does not parse
        """
        start = self.inspect(start_str)
        end = self.inspect(end_str)
        if start is None or end is None:
            return None
        return SpanReport(start=start, end=end, span=format_time_span(start.instant, end.instant))
