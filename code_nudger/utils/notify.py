"""
User-facing notification sinks.

Scanners report to a notifier instead of printing directly so that the
CLI, the watcher and tests can each decide where messages end up.
"""

import sys
from typing import List, Optional, TextIO, Tuple


INFO = "info"
WARNING = "warning"

MESSAGE_PREFIX = "CodeNudger:"


class Notifier:
    """Base notifier. Subclasses override ``emit``."""

    def info(self, message: str) -> None:
        self.emit(INFO, message)

    def warning(self, message: str) -> None:
        self.emit(WARNING, message)

    def emit(self, severity: str, message: str) -> None:
        raise NotImplementedError


class ConsoleNotifier(Notifier):
    """Prints informational messages to stdout and warnings to stderr."""

    def __init__(self, stream: Optional[TextIO] = None, error_stream: Optional[TextIO] = None):
        self.stream = stream
        self.error_stream = error_stream

    def emit(self, severity: str, message: str) -> None:
        if severity == WARNING:
            print(f"⚠️  {message}", file=self.error_stream or sys.stderr)
        else:
            print(f"{MESSAGE_PREFIX} {message}", file=self.stream or sys.stdout)


class CollectingNotifier(Notifier):
    """Keeps every message in memory."""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def emit(self, severity: str, message: str) -> None:
        self.messages.append((severity, message))

    @property
    def infos(self) -> List[str]:
        return [m for s, m in self.messages if s == INFO]

    @property
    def warnings(self) -> List[str]:
        return [m for s, m in self.messages if s == WARNING]

    def clear(self) -> None:
        self.messages = []
