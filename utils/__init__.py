"""Utility modules for tdate.

This package provides the date parsing, formatting and clock functions.

Modules:
    date_utils: Date parsing, formatting and clock arithmetic utilities
"""
from utils.date_utils import (
    ParseError,
    clock_hand_angle,
    format_iso8601,
    format_time_span,
    is_leap_year,
    parse_iso8601_to_date,
    parse_rfc2822_to_utc_millis,
    to_utc_millis,
)

__all__ = [
    "ParseError",
    "clock_hand_angle",
    "format_iso8601",
    "format_time_span",
    "is_leap_year",
    "parse_iso8601_to_date",
    "parse_rfc2822_to_utc_millis",
    "to_utc_millis",
]
