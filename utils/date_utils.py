"""Date parsing, formatting and clock arithmetic utilities for tdate."""

import calendar
import math
import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from email.utils import parsedate_tz
from typing import Union

DateValue = Union[datetime, date, int]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# "GMT+01", "UTC-0530", "GMT+01:00" -> "+0100", "-0530", "+0100"
_PREFIXED_OFFSET = re.compile(r'\b(?:GMT|UTC|UT)\s*([+-])(\d{1,2}):?(\d{2})?\b', re.IGNORECASE)

# "13:48:02.500" -> "13:48:02"
_FRACTIONAL_SECONDS = re.compile(r'(\d{1,2}:\d{2}:\d{2})[.,]\d+')

# Year token of "26 Jan 2016" or "Jan 26, 2016"
_DAY_MONTH_YEAR = re.compile(r'\b(?:\d{1,2}\s+[A-Za-z]+|[A-Za-z]+\s+\d{1,2},?)\s+(\d{2,4})\b')

# Free-form variants that email.utils does not accept
_FREEFORM_FORMATS = (
    "%B %d, %Y %H:%M:%S",
    "%b %d, %Y %H:%M:%S",
    "%B %d, %Y %H:%M",
    "%b %d, %Y %H:%M",
    "%B %d, %Y",
    "%b %d, %Y",
)


class ParseError(ValueError):
    """Raised when a date string does not match the expected grammar."""

    def __init__(self, value, message: str):
        super().__init__(f"{message}: {value!r}")
        self.value = value


def to_utc_millis(value: DateValue) -> int:
    """
    Convert a date value into integer milliseconds since the Unix epoch.

    Naive datetimes and plain dates are read as UTC. Integers are taken
    to already be milliseconds since the epoch.

    Args:
        value: datetime, date or integer milliseconds

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z
    """
    if isinstance(value, int):
        return value
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // timedelta(milliseconds=1)


def _as_utc(value: DateValue) -> datetime:
    """Return the date value as an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=to_utc_millis(value))


def format_iso8601(value: DateValue) -> str:
    """Format a date value as ISO 8601 with an explicit offset."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.isoformat()
    return _as_utc(value).isoformat()


def _whole_second_millis(moment: datetime, value: str) -> int:
    """UTC milliseconds of an aware datetime, truncated to whole seconds."""
    try:
        return calendar.timegm(moment.utctimetuple()) * 1000
    except OverflowError as e:
        raise ParseError(value, "Date out of range in UTC") from e


def parse_rfc2822_to_utc_millis(value: str, default_tz: tzinfo = timezone.utc) -> int:
    """
    Parse an RFC 2822 date string into UTC milliseconds since the epoch.

    Accepts RFC 2822 section 3.3 dates ("Tue, 26 Jan 2016 13:48:02 GMT"),
    "GMT+01" style offsets and the free-form "December 17, 1995 03:24:00".
    Fractional seconds are accepted and dropped. Four-digit years below 100
    ("0001") are taken literally; two-digit years follow RFC 2822.

    Args:
        value: Date string to parse
        default_tz: Zone for strings that carry no offset

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z, a multiple of 1000

    Raises:
        ParseError: If the string is not a recognizable date-time
    """
    if not isinstance(value, str) or not value.strip():
        raise ParseError(value, "Empty or non-string RFC 2822 date")

    text = _PREFIXED_OFFSET.sub(
        lambda m: f"{m.group(1)}{int(m.group(2)):02d}{m.group(3) or '00'}",
        value.strip(),
    )
    text = _FRACTIONAL_SECONDS.sub(r"\1", text)

    parsed = parsedate_tz(text)
    if parsed is not None:
        year, month, day, hour, minute, second = parsed[:6]
        offset = parsed[9]
        # email.utils reads any year below 100 as two-digit; "0001" means year 1
        year_token = _DAY_MONTH_YEAR.search(text)
        if year_token and len(year_token.group(1)) == 4:
            year = int(year_token.group(1))
        try:
            local = datetime(year, month, day, hour, minute, second)
        except ValueError as e:
            raise ParseError(value, "Invalid RFC 2822 date") from e
        if offset is None:
            moment = local.replace(tzinfo=default_tz)
        else:
            moment = local.replace(tzinfo=timezone(timedelta(seconds=offset)))
        return _whole_second_millis(moment, value)

    for fmt in _FREEFORM_FORMATS:
        try:
            local = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return _whole_second_millis(local.replace(tzinfo=default_tz), value)

    raise ParseError(value, "Unrecognized RFC 2822 date")


def parse_iso8601_to_date(value: str, default_tz: tzinfo = timezone.utc) -> datetime:
    """
    Parse an ISO 8601 date string into an aware datetime.

    Args:
        value: Date string such as "2016-01-19T16:07:37+00:00" or "2016-01-19T08:07:37Z"
        default_tz: Zone for strings without "Z" or a numeric offset

    Returns:
        Aware datetime for the same instant

    Raises:
        ParseError: If the string is not valid ISO 8601
    """
    try:
        text = value.strip()
        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'
        parsed = datetime.fromisoformat(text)
    except (AttributeError, TypeError, ValueError) as e:
        raise ParseError(value, "Invalid ISO 8601 date") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=default_tz)
    # Every result must be representable in UTC ("0001-01-01T00:00:00+01:00" is not)
    try:
        parsed.astimezone(timezone.utc)
    except OverflowError as e:
        raise ParseError(value, "Date out of range in UTC") from e
    return parsed


def is_leap_year(value: DateValue) -> bool:
    """Return True if the value's calendar year is a Gregorian leap year."""
    year = _as_utc(value).year if isinstance(value, int) else value.year
    return (year % 400 == 0) or (year % 100 != 0 and year % 4 == 0)


def format_time_span(start: DateValue, end: DateValue) -> str:
    """
    Format the absolute span between two date values.

    Returns format "HH:mm:ss.sss". Hours do not wrap at a day boundary.

    Args:
        start: First date value
        end: Second date value

    Returns:
        Formatted span string
    """
    diff = abs(to_utc_millis(end) - to_utc_millis(start))

    total_seconds, millis = divmod(diff, 1000)
    total_minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(total_minutes, 60)

    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def clock_hand_angle(value: DateValue) -> float:
    """
    Angle in radians between the hour and minute hands at the UTC time of value.

    Always the smaller angle, in [0, pi].
    """
    moment = _as_utc(value)
    hour = moment.hour % 12
    minute = moment.minute

    angle = (math.pi / 360) * abs(60 * hour - 11 * minute)
    return 2 * math.pi - angle if angle > math.pi else angle
