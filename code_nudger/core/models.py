"""
Domain models for code-nudger.

This module contains the core data structures shared by the parser,
the scanners and the due-today view.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional
import json
import os
import re

from .exceptions import ConfigurationError


DEFAULT_INCLUDE_EXTENSIONS = ["js", "ts", "py", "java", "cs", "cpp", "go", "rb", "php"]
DEFAULT_EXCLUDE_DIRS = [
    "node_modules",
    "venv",
    ".git",
    "__pycache__",
    "dist",
    "out",
    "build",
    "target",
    ".idea",
]
DEFAULT_EXCLUDE_MARKER = "// @excludeScan"
DEFAULT_TIME = "09:00"

_DEFAULT_TIME_RE = re.compile(r"^[0-9]{2}:[0-9]{2}$")


def _is_clock_time(value: Optional[str]) -> bool:
    """Check for a zero-padded 24-hour HH:MM time."""
    if not value or not _DEFAULT_TIME_RE.match(value):
        return False
    try:
        datetime.strptime(value, "%H:%M")
    except ValueError:
        return False
    return True


def _normalize_path(path: str) -> str:
    """Expand user and convert to absolute path."""
    return os.path.abspath(os.path.expanduser(path))


def normalize_extensions(extensions: List[str]) -> List[str]:
    """Lower-case extensions, strip leading dots and drop duplicates."""
    normalized: List[str] = []
    for ext in extensions:
        value = ext.strip().lstrip(".").lower()
        if value and value not in normalized:
            normalized.append(value)
    return normalized


@dataclass
class ParsedAnnotation:
    """Fields extracted from a single annotated line."""

    date_str: str
    time_str: str
    message: str
    scheduled: Optional[datetime]


@dataclass
class Reminder:
    """Represents one reminder annotation found in a source file."""

    file: str
    line: int
    message: str
    scheduled: Optional[datetime]
    date_str: str = ""
    time_str: str = DEFAULT_TIME

    @property
    def is_valid(self) -> bool:
        return self.scheduled is not None

    def is_due(self, now: datetime) -> bool:
        """A reminder with an unparseable date is never due."""
        if self.scheduled is None:
            return False
        return self.scheduled <= now

    @property
    def file_name(self) -> str:
        return os.path.basename(self.file)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file,
            "line": self.line,
            "message": self.message,
            "scheduled": self.scheduled.isoformat() if self.scheduled else None,
            "date": self.date_str,
            "time": self.time_str,
        }


class ReminderStore:
    """
    Process-lifetime collection of reminders.

    Replaced wholesale on a full workspace scan and appended to by
    single-document scans. Readers should take a fresh snapshot via
    ``all()`` every time they project it.
    """

    def __init__(self, reminders: Optional[List[Reminder]] = None):
        self._reminders: List[Reminder] = list(reminders or [])

    def reset(self) -> None:
        self._reminders = []

    def add(self, reminder: Reminder) -> None:
        self._reminders.append(reminder)

    def extend(self, reminders: List[Reminder]) -> None:
        self._reminders.extend(reminders)

    def remove_file(self, file_path: str) -> int:
        """Drop every reminder recorded for a file. Returns the number removed."""
        before = len(self._reminders)
        self._reminders = [r for r in self._reminders if r.file != file_path]
        return before - len(self._reminders)

    def all(self) -> List[Reminder]:
        return list(self._reminders)

    def __len__(self) -> int:
        return len(self._reminders)

    def __iter__(self) -> Iterator[Reminder]:
        return iter(self.all())


@dataclass
class WorkspaceScanResult:
    """Counters collected during a full workspace scan."""

    root: str
    files_scanned: int = 0
    files_skipped: int = 0
    files_failed: int = 0
    reminders_found: int = 0
    failed_paths: List[str] = field(default_factory=list)


@dataclass
class ScanConfig:
    """Configuration for scan operations."""

    workspace_root: Optional[str] = None
    include_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_INCLUDE_EXTENSIONS))
    exclude_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    exclude_marker: str = DEFAULT_EXCLUDE_MARKER
    default_time: str = DEFAULT_TIME
    prune_on_rescan: bool = False
    report_invalid_dates: bool = True
    watch_interval: float = 2.0

    def __post_init__(self) -> None:
        if self.workspace_root:
            self.workspace_root = _normalize_path(self.workspace_root)
        else:
            self.workspace_root = None

        self.include_extensions = normalize_extensions(self.include_extensions)
        self.exclude_dirs = [d.strip().strip("/\\") for d in self.exclude_dirs if d.strip()]

        if not _is_clock_time(self.default_time):
            raise ConfigurationError(
                f"default_time must be a valid HH:MM time, got {self.default_time!r}"
            )
        if self.watch_interval <= 0:
            raise ConfigurationError("watch_interval must be greater than zero")

    # ------------------------------------------------------------------
    # Persistence helpers
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "workspace_root": self.workspace_root,
            "scan": {
                "include_extensions": list(self.include_extensions),
                "exclude_dirs": list(self.exclude_dirs),
                "exclude_marker": self.exclude_marker,
            },
            "reminders": {
                "default_time": self.default_time,
                "prune_on_rescan": self.prune_on_rescan,
                "report_invalid_dates": self.report_invalid_dates,
            },
            "watch": {
                "interval": self.watch_interval,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ScanConfig:
        scan_settings = data.get("scan", {})
        reminder_settings = data.get("reminders", {})
        watch_settings = data.get("watch", {})

        return cls(
            workspace_root=data.get("workspace_root"),
            include_extensions=scan_settings.get(
                "include_extensions", list(DEFAULT_INCLUDE_EXTENSIONS)
            ),
            exclude_dirs=scan_settings.get("exclude_dirs", list(DEFAULT_EXCLUDE_DIRS)),
            exclude_marker=scan_settings.get("exclude_marker", DEFAULT_EXCLUDE_MARKER),
            default_time=reminder_settings.get("default_time", DEFAULT_TIME),
            prune_on_rescan=reminder_settings.get("prune_on_rescan", False),
            report_invalid_dates=reminder_settings.get("report_invalid_dates", True),
            watch_interval=float(watch_settings.get("interval", 2.0)),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> ScanConfig:
        config_path = _normalize_path(config_path)
        if not os.path.exists(config_path):
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as handle:
                data = json.load(handle)
        except json.JSONDecodeError:
            return cls()

        if not isinstance(data, dict):
            return cls()
        return cls.from_dict(data)

    def save_to_file(self, config_path: str) -> None:
        config_path = _normalize_path(config_path)
        with open(config_path, "w", encoding="utf-8") as handle:
            json.dump(self.to_dict(), handle, indent=2)
