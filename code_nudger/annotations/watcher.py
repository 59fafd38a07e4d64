"""
Polling watcher that turns file changes into scan triggers.
"""

import logging
import os
import time
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .service import ReminderService
from .workspace import iter_source_files


class WorkspaceWatcher:
    """
    Detects created and modified source files by comparing mtimes.

    New files are dispatched as "opened", changed files as "saved".
    Deleted files are forgotten but their reminders stay in the store
    until the next full scan.
    """

    def __init__(
        self,
        service: ReminderService,
        root: str,
        include_extensions: Iterable[str],
        exclude_dirs: Iterable[str],
        sleep: Optional[Callable[[float], None]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.service = service
        self.root = os.path.abspath(os.path.expanduser(root))
        self.include_extensions = list(include_extensions)
        self.exclude_dirs = list(exclude_dirs)
        self.sleep = sleep or time.sleep
        self.logger = logger or logging.getLogger(__name__)
        self._mtimes: Dict[str, float] = {}

    def snapshot(self) -> Dict[str, float]:
        mtimes = {}
        for path in iter_source_files(self.root, self.include_extensions, self.exclude_dirs):
            try:
                mtimes[path] = os.stat(path).st_mtime
            except OSError:
                # Removed between listing and stat
                continue
        return mtimes

    def prime(self) -> None:
        """Record the current state without dispatching anything."""
        self._mtimes = self.snapshot()

    def poll(self) -> Tuple[List[str], List[str]]:
        """
        Compare the tree against the previous snapshot.

        Returns:
            (opened, saved) lists of absolute paths
        """
        current = self.snapshot()
        opened = [p for p in current if p not in self._mtimes]
        saved = [
            p for p, mtime in current.items()
            if p in self._mtimes and mtime != self._mtimes[p]
        ]
        self._mtimes = current
        return sorted(opened), sorted(saved)

    def dispatch(self, opened: List[str], saved: List[str]) -> int:
        for path in opened:
            self.service.on_document_opened(path)
        for path in saved:
            self.service.on_document_saved(path)
        return len(opened) + len(saved)

    def run(
        self,
        interval: float,
        max_cycles: Optional[int] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> int:
        """
        Scan the workspace once, then poll until interrupted.

        Args:
            interval: Seconds between polls
            max_cycles: Stop after this many polls (None runs forever)
            on_change: Called after each poll that dispatched a trigger

        Returns:
            Number of triggers dispatched
        """
        self.service.scan_workspace(self.root)
        self.prime()
        if on_change:
            on_change()

        dispatched = 0
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            self.sleep(interval)
            cycles += 1
            opened, saved = self.poll()
            if not opened and not saved:
                continue
            self.logger.debug("Detected %d new and %d modified files", len(opened), len(saved))
            dispatched += self.dispatch(opened, saved)
            if on_change:
                on_change()

        return dispatched
