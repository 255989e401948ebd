"""Data models for date inspection results."""
import math
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DateReport:
    """Everything tdate computes for a single instant.

    - utc_millis: milliseconds since the Unix epoch
    - iso: ISO 8601 rendering with explicit offset
    - clock_angle: radians between the clock hands at the UTC time of day
    """
    source: str
    instant: datetime
    utc_millis: int
    iso: str
    leap_year: bool
    clock_angle: float

    @property
    def clock_angle_degrees(self) -> float:
        """Clock-hand angle in degrees."""
        return math.degrees(self.clock_angle)


@dataclass(frozen=True)
class SpanReport:
    """Span between two inspected instants."""
    start: DateReport
    end: DateReport
    span: str

    @property
    def is_negative(self) -> bool:
        """True when end comes before start (the span itself is always unsigned)."""
        return self.end.utc_millis < self.start.utc_millis
