"""
Tests for the due-today view (code_nudger/annotations/today.py).
"""

from datetime import date, datetime

from code_nudger.annotations.today import (
    format_items,
    project_due_today,
    reminders_for_day,
)
from code_nudger.core.models import Reminder


def _reminder(line, scheduled, message="msg", file="/work/src/app.py"):
    return Reminder(file=file, line=line, message=message, scheduled=scheduled)


class TestRemindersForDay:
    """Test suite for the calendar-date filter."""

    def test_any_time_of_day_is_included(self):
        """Test reminders at any hour of the day."""
        day = date(2024, 6, 1)
        reminders = [
            _reminder(1, datetime(2024, 6, 1, 0, 0)),
            _reminder(2, datetime(2024, 6, 1, 23, 59)),
            _reminder(3, datetime(2024, 6, 1, 9, 0)),
        ]

        assert [r.line for r in reminders_for_day(reminders, day)] == [1, 2, 3]

    def test_other_days_are_excluded(self):
        """Test filtering out other days."""
        day = date(2024, 6, 1)
        reminders = [
            _reminder(1, datetime(2024, 5, 31, 23, 59)),
            _reminder(2, datetime(2024, 6, 2, 0, 0)),
            _reminder(3, datetime(2023, 6, 1, 9, 0)),
            _reminder(4, datetime(2024, 7, 1, 9, 0)),
        ]

        assert reminders_for_day(reminders, day) == []

    def test_insertion_order_is_kept(self):
        """Test that items keep store order."""
        day = date(2024, 6, 1)
        reminders = [
            _reminder(10, datetime(2024, 6, 1, 17, 0)),
            _reminder(20, datetime(2024, 6, 1, 8, 0)),
        ]

        assert [r.line for r in reminders_for_day(reminders, day)] == [10, 20]

    def test_invalid_reminders_are_excluded(self):
        """Test skipping reminders without a timestamp."""
        assert reminders_for_day([_reminder(1, None)], date(2024, 6, 1)) == []


class TestProjectDueToday:
    """Test suite for ReminderItem rendering."""

    def test_label_tooltip_and_description(self):
        """Test item label, tooltip and description."""
        reminder = _reminder(12, datetime(2024, 6, 1, 14, 30), message="Call vendor")

        items = project_due_today([reminder], date(2024, 6, 1))

        assert len(items) == 1
        item = items[0]
        assert item.label == "app.py (Line 12) - Call vendor"
        assert item.tooltip == "app.py (Line 12) - Call vendor\nScheduled: 2024-06-01 14:30:00"
        assert item.description == "14:30"
        assert item.reminder is reminder

    def test_defaults_to_local_today(self):
        """Test defaulting to the local date."""
        now = datetime.now().replace(second=0, microsecond=0)
        reminders = [_reminder(1, now), _reminder(2, datetime(1999, 1, 1, 9, 0))]

        items = project_due_today(reminders)

        assert [i.reminder.line for i in items] == [1]

    def test_format_items(self):
        """Test rendering today's items."""
        items = project_due_today(
            [_reminder(3, datetime(2024, 6, 1, 9, 0), message="Standup")],
            date(2024, 6, 1),
        )

        text = format_items(items, date(2024, 6, 1))

        assert text.splitlines()[0] == "Reminders for 2024-06-01"
        assert "09:00  app.py (Line 3) - Standup" in text

    def test_format_items_empty(self):
        """Test rendering an empty day."""
        assert "(none)" in format_items([])
