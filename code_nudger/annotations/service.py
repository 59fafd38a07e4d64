"""
Trigger surface for hosts that drive reminder scanning.

A host (the CLI, the watcher, an editor bridge) owns one ReminderService
and calls its trigger methods one at a time.
"""

import logging
import os
from datetime import date, datetime
from typing import Callable, List, Optional

from ..core.exceptions import ScanError
from ..core.models import ReminderStore, ScanConfig, WorkspaceScanResult
from ..utils.notify import Notifier
from .completion import CompletionItem, complete_annotation
from .scanner import DocumentScanner
from .today import ReminderItem, project_due_today
from .workspace import WorkspaceScanner


class ReminderService:
    """Wires the store, scanners and due-today view together."""

    def __init__(
        self,
        config: ScanConfig,
        notifier: Notifier,
        store: Optional[ReminderStore] = None,
        clock: Callable[[], datetime] = datetime.now,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.notifier = notifier
        self.store = store if store is not None else ReminderStore()
        self.logger = logger or logging.getLogger(__name__)

        self.scanner = DocumentScanner(
            self.store,
            notifier,
            clock=clock,
            default_time=config.default_time,
            report_invalid_dates=config.report_invalid_dates,
        )
        self.workspace = WorkspaceScanner(
            self.store,
            self.scanner,
            notifier,
            include_extensions=config.include_extensions,
            exclude_dirs=config.exclude_dirs,
            exclude_marker=config.exclude_marker,
        )

    def scan_workspace(self, root: Optional[str] = None) -> Optional[WorkspaceScanResult]:
        """Full scan; replaces the store contents."""
        if root is None:
            root = self.config.workspace_root
        return self.workspace.scan(root)

    def on_document_saved(self, file_path: str) -> bool:
        return self._scan_document(file_path, "saved")

    def on_document_opened(self, file_path: str) -> bool:
        return self._scan_document(file_path, "opened")

    def _scan_document(self, file_path: str, trigger: str) -> bool:
        file_path = os.path.abspath(file_path)
        self.logger.debug("Document %s: %s", trigger, file_path)

        if self.config.prune_on_rescan:
            removed = self.store.remove_file(file_path)
            if removed:
                self.logger.debug("Pruned %d stale reminders for %s", removed, file_path)

        try:
            return self.scanner.scan_file(file_path, notify=True)
        except ScanError as exc:
            self.logger.error("Error scanning file %s: %s", file_path, exc)
            self.notifier.info(f"Could not read {os.path.basename(file_path)}.")
            return False

    def due_today(self, today: Optional[date] = None) -> List[ReminderItem]:
        return project_due_today(self.store.all(), today)

    def complete(self, line_prefix: str) -> List[CompletionItem]:
        return complete_annotation(line_prefix)
