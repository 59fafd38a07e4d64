"""
Reminder annotation parsing.

An annotation lives in a line comment and looks like::

    // @reminder 2024-06-01 [09:00]: Renew the TLS certificate

The time in brackets is optional and defaults to 09:00.
"""

import re
from datetime import datetime
from typing import Optional

from ..core.models import DEFAULT_TIME, ParsedAnnotation


# Existing annotated codebases depend on this exact pattern.
REMINDER_PATTERN = r'//\s*@reminder\s+(\d{4}-\d{2}-\d{2})(?:\s*\[([\d:]+)\])?:\s*(.+)'
REMINDER_RE = re.compile(REMINDER_PATTERN)

# Hour and minute must both be zero-padded.
_TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}")

SCHEDULED_FORMAT = '%Y-%m-%dT%H:%M:%S'


def build_scheduled(date_str: str, time_str: str) -> Optional[datetime]:
    """
    Combine matched date and time strings into a local timestamp.

    Args:
        date_str: Date in YYYY-MM-DD form
        time_str: Time in HH:MM form

    Returns:
        Naive local datetime, or None if the combination is not a real
        point in time (month 13, ``14:30:15``, ``9:00``, ``::``)
    """
    if not _TIME_RE.fullmatch(time_str):
        return None
    try:
        return datetime.strptime(f"{date_str}T{time_str}:00", SCHEDULED_FORMAT)
    except ValueError:
        return None


def _is_ascii_match(match) -> bool:
    time_str = match.group(2)
    return match.group(1).isascii() and (time_str is None or time_str.isascii())


def parse_reminder_line(line: str, default_time: str = DEFAULT_TIME) -> Optional[ParsedAnnotation]:
    """
    Parse a single line of text into a reminder annotation.

    Args:
        line: Raw line of text, with or without its line terminator
        default_time: Time used when the annotation has no [HH:MM] part

    Returns:
        ParsedAnnotation or None if the line holds no annotation
    """
    pos = 0
    while True:
        match = REMINDER_RE.search(line, pos)
        if not match:
            return None
        # Only ASCII digits count, but \s keeps its Unicode meaning.
        if _is_ascii_match(match):
            break
        pos = match.start() + 1

    date_str = match.group(1)
    time_str = match.group(2) or default_time
    message = match.group(3).strip()

    return ParsedAnnotation(
        date_str=date_str,
        time_str=time_str,
        message=message,
        scheduled=build_scheduled(date_str, time_str),
    )


def contains_exclude_marker(content: str, marker: str) -> bool:
    """Check whether a document opted out of workspace scans."""
    return bool(marker) and marker in content
