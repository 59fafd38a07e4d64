"""
Reminder annotation scanning for code-nudger.
"""

from .parser import parse_reminder_line, build_scheduled, REMINDER_PATTERN
from .completion import complete_annotation, render_snippet, CompletionItem, TRIGGER_CHARACTER
from .scanner import DocumentScanner
from .workspace import WorkspaceScanner, iter_source_files
from .today import ReminderItem, project_due_today, reminders_for_day
from .service import ReminderService
from .watcher import WorkspaceWatcher

__all__ = [
    'parse_reminder_line',
    'build_scheduled',
    'REMINDER_PATTERN',
    'complete_annotation',
    'render_snippet',
    'CompletionItem',
    'TRIGGER_CHARACTER',
    'DocumentScanner',
    'WorkspaceScanner',
    'iter_source_files',
    'ReminderItem',
    'project_due_today',
    'reminders_for_day',
    'ReminderService',
    'WorkspaceWatcher',
]
