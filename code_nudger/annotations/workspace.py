"""
Workspace discovery and full-tree reminder scanning.
"""

import logging
import os
from typing import Iterable, List, Optional

from ..core.exceptions import ScanError
from ..core.models import ReminderStore, WorkspaceScanResult
from ..utils.io import split_document_lines
from ..utils.notify import Notifier
from .parser import contains_exclude_marker
from .scanner import DocumentScanner


def iter_source_files(
    root: str,
    include_extensions: Iterable[str],
    exclude_dirs: Iterable[str],
) -> List[str]:
    """
    Collect eligible source files under a workspace root.

    Directories named in ``exclude_dirs`` are pruned at any depth, so
    nothing below them is ever opened.

    Args:
        root: Workspace root directory
        include_extensions: Allowed file extensions without the dot
        exclude_dirs: Directory names to skip

    Returns:
        Sorted list of absolute file paths
    """
    extensions = {ext.lower() for ext in include_extensions}
    skip_dirs = set(exclude_dirs)
    source_files = []

    for current, dirs, files in os.walk(os.path.abspath(root)):
        dirs[:] = sorted(d for d in dirs if d not in skip_dirs)

        for file in files:
            _, ext = os.path.splitext(file)
            if ext and ext[1:].lower() in extensions:
                source_files.append(os.path.join(current, file))

    return sorted(source_files)


class WorkspaceScanner:
    """Scans every eligible file in a workspace into the reminder store."""

    def __init__(
        self,
        store: ReminderStore,
        scanner: DocumentScanner,
        notifier: Notifier,
        include_extensions: Iterable[str],
        exclude_dirs: Iterable[str],
        exclude_marker: str,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.scanner = scanner
        self.notifier = notifier
        self.include_extensions = list(include_extensions)
        self.exclude_dirs = list(exclude_dirs)
        self.exclude_marker = exclude_marker
        self.logger = logger or logging.getLogger(__name__)

    def scan(self, root: Optional[str]) -> Optional[WorkspaceScanResult]:
        """
        Replace the store contents with the reminders of the whole workspace.

        The store is only reset once the root is known to exist.

        Args:
            root: Workspace root directory

        Returns:
            Scan counters, or None when there is no workspace to scan
        """
        if not root:
            self.notifier.info("No workspace is open.")
            return None

        root = os.path.abspath(os.path.expanduser(root))
        if not os.path.isdir(root):
            self.notifier.info(f"Workspace not found: {root}")
            return None

        self.store.reset()
        result = WorkspaceScanResult(root=root)
        files = iter_source_files(root, self.include_extensions, self.exclude_dirs)
        self.logger.debug("Found %d candidate files under %s", len(files), root)

        for file_path in files:
            before = len(self.store)
            try:
                content = self.scanner.read_document(file_path)
                if contains_exclude_marker(content, self.exclude_marker):
                    self.logger.debug("Skipping %s (opt-out marker)", file_path)
                    result.files_skipped += 1
                    continue
                self.scanner.scan_lines(file_path, split_document_lines(content), notify=False)
            except ScanError as exc:
                self.logger.error("Error scanning file %s: %s", file_path, exc)
                result.files_failed += 1
                result.failed_paths.append(file_path)
                continue

            result.files_scanned += 1
            result.reminders_found += len(self.store) - before

        self.notifier.info("Workspace scan complete.")
        return result
