"""
Due-today view of the reminder store.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from ..core.models import Reminder
from ..utils.date import format_clock, format_timestamp, same_day


@dataclass
class ReminderItem:
    """Display-ready entry of the due-today list."""

    label: str
    reminder: Reminder
    tooltip: str
    description: str


def reminders_for_day(reminders: Iterable[Reminder], day: date) -> List[Reminder]:
    """Keep reminders scheduled on ``day`` in their original order."""
    return [r for r in reminders if same_day(r.scheduled, day)]


def make_item(reminder: Reminder) -> ReminderItem:
    label = f"{reminder.file_name} (Line {reminder.line}) - {reminder.message}"
    return ReminderItem(
        label=label,
        reminder=reminder,
        tooltip=f"{label}\nScheduled: {format_timestamp(reminder.scheduled)}",
        description=format_clock(reminder.scheduled),
    )


def project_due_today(reminders: Iterable[Reminder], today: Optional[date] = None) -> List[ReminderItem]:
    """
    Build the due-today list.

    Args:
        reminders: Current reminder collection
        today: Calendar date to project, defaults to the local date

    Returns:
        ReminderItems for reminders scheduled on that date, any time of day
    """
    if today is None:
        today = date.today()
    return [make_item(r) for r in reminders_for_day(reminders, today)]


def format_items(items: List[ReminderItem], today: Optional[date] = None) -> str:
    """Render the due-today list for the terminal."""
    heading = "Reminders for today"
    if today is not None:
        heading = f"Reminders for {today.isoformat()}"

    lines = [heading, "=" * len(heading)]
    if not items:
        lines.append("  (none)")
    for item in items:
        lines.append(f"  🕘 {item.description}  {item.label}")
    return "\n".join(lines)
