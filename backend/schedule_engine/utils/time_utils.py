"""
Date and time-of-day helpers for the data source boundary format.
Dates travel as YYYY-MM-DD, times of day as zero-padded 24-hour HH:MM.
"""

from datetime import date
from typing import Tuple


def format_date_for_api(day: date) -> str:
    """Format a date for API requests (YYYY-MM-DD)."""
    return day.strftime("%Y-%m-%d")


def parse_time(value: str) -> Tuple[int, int]:
    """
    Split an HH:MM string into (hours, minutes).

    Hours are not range checked, layout callers supply them in range.

    Raises:
        ValueError: if the string is not two colon-separated integers
    """
    parts = value.split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time of day: {value!r}")
    hours, minutes = (int(part) for part in parts)
    return hours, minutes


def parse_hour(value: str) -> int:
    """Return only the hour component of an HH:MM string."""
    return int(value.split(":")[0])


def to_minutes(value: str) -> int:
    """Minutes since midnight for an HH:MM string."""
    hours, minutes = parse_time(value)
    return hours * 60 + minutes


def format_minutes(total: int) -> str:
    """Inverse of to_minutes."""
    return f"{total // 60:02d}:{total % 60:02d}"


def is_valid_time(value: str) -> bool:
    """True for a zero-padded HH:MM string inside a single day."""
    if len(value) != 5 or value[2] != ":":
        return False
    try:
        hours, minutes = parse_time(value)
    except ValueError:
        return False
    return 0 <= hours <= 23 and 0 <= minutes <= 59
