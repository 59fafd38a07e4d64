"""
Date parsing and formatting utilities.
"""

from datetime import date, datetime
from typing import Optional


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
CLOCK_FORMAT = "%H:%M"


def parse_date(date_str: Optional[str]) -> Optional[date]:
    """
    Parse a date string into a date object.

    Handles:
    - ISO format (YYYY-MM-DD)
    - ISO datetime (YYYY-MM-DDTHH:MM:SS), time part is ignored

    Args:
        date_str: Date string to parse

    Returns:
        Parsed date object or None if invalid
    """
    if not date_str:
        return None

    # Take only date part if it's a datetime string
    if 'T' in date_str:
        date_str = date_str.split('T')[0]

    try:
        return datetime.strptime(date_str.strip(), '%Y-%m-%d').date()
    except ValueError:
        return None


def format_timestamp(value: Optional[datetime]) -> str:
    """Full local representation used in tooltips and listings."""
    if value is None:
        return "invalid date"
    return value.strftime(TIMESTAMP_FORMAT)


def format_clock(value: Optional[datetime]) -> str:
    """Short time-of-day representation."""
    if value is None:
        return "--:--"
    return value.strftime(CLOCK_FORMAT)


def same_day(value: Optional[datetime], day: date) -> bool:
    """Check whether a timestamp falls on the given calendar date."""
    if value is None:
        return False
    return (
        value.year == day.year
        and value.month == day.month
        and value.day == day.day
    )
