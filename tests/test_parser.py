"""
Tests for reminder annotation parsing (code_nudger/annotations/parser.py).
"""

from datetime import datetime

import pytest

from code_nudger.annotations.parser import (
    REMINDER_PATTERN,
    build_scheduled,
    contains_exclude_marker,
    parse_reminder_line,
)


class TestParseReminderLine:
    """Test suite for parse_reminder_line."""

    def test_date_only_defaults_to_nine(self):
        """Test parsing a date without a time."""
        parsed = parse_reminder_line("// @reminder 2024-01-01: Renew license")

        assert parsed is not None
        assert parsed.date_str == "2024-01-01"
        assert parsed.time_str == "09:00"
        assert parsed.message == "Renew license"
        assert parsed.scheduled == datetime(2024, 1, 1, 9, 0)

    def test_explicit_time(self):
        """Test parsing a bracketed time."""
        parsed = parse_reminder_line("// @reminder 2024-01-01 [14:30]: Call vendor")

        assert parsed is not None
        assert parsed.time_str == "14:30"
        assert parsed.message == "Call vendor"
        assert parsed.scheduled == datetime(2024, 1, 1, 14, 30)

    def test_time_without_space_before_bracket(self):
        """Test a time bracket directly after the date."""
        parsed = parse_reminder_line("//@reminder 2024-03-05[07:05]: Tight spacing")

        assert parsed is not None
        assert parsed.scheduled == datetime(2024, 3, 5, 7, 5)
        assert parsed.message == "Tight spacing"

    def test_annotation_after_code(self):
        """Test an annotation trailing code on the same line."""
        parsed = parse_reminder_line("    x = compute()  // @reminder 2024-02-02: Cache this")

        assert parsed is not None
        assert parsed.message == "Cache this"

    def test_message_is_trimmed(self):
        """Test trimming of the message."""
        parsed = parse_reminder_line("// @reminder 2024-01-01:    padded message   ")

        assert parsed is not None
        assert parsed.message == "padded message"

    def test_whitespace_only_message_is_accepted(self):
        """The raw group matched a space, so the annotation counts even if empty after trim."""
        parsed = parse_reminder_line("// @reminder 2024-01-01:  ")

        assert parsed is not None
        assert parsed.message == ""

    @pytest.mark.parametrize("line", [
        "// @reminder 2024-01-01:",
        "# @reminder 2024-01-01: hash comments are not recognised",
        "// @reminder 24-01-01: short year",
        "// @reminder 2024-1-1: unpadded",
        "// @reminder 2024-01-01 [9am]: words in time",
        "// @reminder 2024-01-01 no colon",
        "// @reminders 2024-01-01: wrong keyword",
        "// reminder 2024-01-01: missing at sign",
        "",
    ])
    def test_non_matching_lines(self, line):
        """Test lines that are not annotations."""
        assert parse_reminder_line(line) is None

    def test_invalid_month_matches_but_has_no_schedule(self):
        """Test an impossible date that still matches."""
        parsed = parse_reminder_line("// @reminder 2024-13-40: Impossible date")

        assert parsed is not None
        assert parsed.message == "Impossible date"
        assert parsed.scheduled is None

    def test_extra_time_segments_give_invalid_schedule(self):
        """Test a time with a seconds segment."""
        parsed = parse_reminder_line("// @reminder 2024-01-01 [14:30:15]: Seconds")

        assert parsed is not None
        assert parsed.time_str == "14:30:15"
        assert parsed.scheduled is None

    @pytest.mark.parametrize("time_str", ["9:00", "9:5", "09:5"])
    def test_unpadded_time_gives_invalid_schedule(self, time_str):
        """Test that hours and minutes must both be two digits."""
        parsed = parse_reminder_line(f"// @reminder 2024-01-01 [{time_str}]: Standup")

        assert parsed is not None
        assert parsed.time_str == time_str
        assert parsed.scheduled is None

    def test_custom_default_time(self):
        """Test a configured default time."""
        parsed = parse_reminder_line("// @reminder 2024-01-01: Standup", default_time="10:15")

        assert parsed is not None
        assert parsed.scheduled == datetime(2024, 1, 1, 10, 15)

    def test_parsing_is_idempotent(self):
        """Test that parsing the same line twice gives equal results."""
        line = "// @reminder 2024-08-09 [16:45]: Same every time"

        assert parse_reminder_line(line) == parse_reminder_line(line)

    def test_non_ascii_digits_are_not_dates(self):
        """Test that non-ASCII digits do not form a date."""
        assert parse_reminder_line("// @reminder ٢٠٢٤-٠١-٠١: Arabic-Indic digits") is None

    def test_unicode_whitespace_separates_tokens(self):
        """Test that a non-breaking space counts as whitespace."""
        parsed = parse_reminder_line("//\xa0@reminder 2024-01-01: NBSP")

        assert parsed is not None
        assert parsed.message == "NBSP"
        assert parsed.scheduled == datetime(2024, 1, 1, 9, 0)

    def test_non_ascii_digits_in_time_are_rejected(self):
        """Test that a bracketed time with non-ASCII digits rejects the annotation."""
        assert parse_reminder_line("// @reminder 2024-01-01 [٠٩:٠٠]: Arabic-Indic time") is None

    def test_later_ascii_annotation_is_found(self):
        """Test that a non-ASCII date does not hide a valid annotation later in the line."""
        parsed = parse_reminder_line("// @reminder ٢٠٢٤-٠١-٠١: x // @reminder 2024-02-02: Real")

        assert parsed is not None
        assert parsed.date_str == "2024-02-02"
        assert parsed.message == "Real"


class TestHelpers:
    """Test suite for parser helper functions."""

    def test_pattern_is_unchanged(self):
        """Test the annotation pattern text."""
        assert REMINDER_PATTERN == r'//\s*@reminder\s+(\d{4}-\d{2}-\d{2})(?:\s*\[([\d:]+)\])?:\s*(.+)'

    def test_build_scheduled_valid(self):
        """Test building a timestamp on a leap day."""
        assert build_scheduled("2024-02-29", "23:59") == datetime(2024, 2, 29, 23, 59)

    def test_build_scheduled_rejects_non_leap_day(self):
        """Test rejecting Feb 29 in a common year."""
        assert build_scheduled("2023-02-29", "09:00") is None

    def test_build_scheduled_rejects_hour_overflow(self):
        """Test rejecting an hour past 23."""
        assert build_scheduled("2024-01-01", "25:00") is None

    def test_exclude_marker(self):
        """Test detection of the opt-out marker."""
        assert contains_exclude_marker("a\n// @excludeScan\nb", "// @excludeScan")
        assert not contains_exclude_marker("// @exclude scan", "// @excludeScan")
        assert not contains_exclude_marker("anything", "")
