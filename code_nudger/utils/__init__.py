"""
Utility functions for code-nudger.
"""

from .io import read_text, split_document_lines, safe_write_json
from .date import parse_date, format_timestamp, format_clock, same_day
from .notify import Notifier, ConsoleNotifier, CollectingNotifier

__all__ = [
    # I/O utilities
    'read_text',
    'split_document_lines',
    'safe_write_json',
    # Date utilities
    'parse_date',
    'format_timestamp',
    'format_clock',
    'same_day',
    # Notification sinks
    'Notifier',
    'ConsoleNotifier',
    'CollectingNotifier',
]
