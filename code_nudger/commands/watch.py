"""Watch command - rescan documents as they are created or saved."""

import logging
import os
from datetime import date
from typing import Optional

from ..annotations.service import ReminderService
from ..annotations.today import format_items
from ..annotations.watcher import WorkspaceWatcher
from ..core.exceptions import WorkspaceNotFoundError
from ..core.models import ScanConfig
from ..utils.notify import ConsoleNotifier, Notifier


class WatchCommand:
    """Command for keeping the due-today view current while files change."""

    def __init__(self, config: ScanConfig, verbose: bool = False, notifier: Optional[Notifier] = None):
        self.config = config
        self.verbose = verbose
        self.notifier = notifier or ConsoleNotifier()
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(
        self,
        root: Optional[str] = None,
        interval: Optional[float] = None,
        cycles: Optional[int] = None,
    ) -> bool:
        """
        Watch the workspace until interrupted.

        Args:
            root: Workspace root; falls back to the configured root
            interval: Seconds between polls; falls back to config
            cycles: Stop after this many polls

        Returns:
            True when the watch loop ended normally
        """
        root = root or self.config.workspace_root
        if not root:
            self.notifier.info("No workspace is open.")
            return False

        try:
            service = ReminderService(self.config, self.notifier)
            watcher = WorkspaceWatcher(
                service,
                root,
                include_extensions=self.config.include_extensions,
                exclude_dirs=self.config.exclude_dirs,
            )
            if not os.path.isdir(watcher.root):
                raise WorkspaceNotFoundError(f"Workspace not found: {watcher.root}")

            def refresh() -> None:
                today = date.today()
                print("")
                print(format_items(service.due_today(today), today))

            print(f"👀 Watching {watcher.root} (Ctrl+C to stop)")
            dispatched = watcher.run(
                interval if interval is not None else self.config.watch_interval,
                max_cycles=cycles,
                on_change=refresh,
            )
            self.logger.debug("Watch loop finished after %d trigger(s)", dispatched)
            return True

        except WorkspaceNotFoundError as exc:
            self.notifier.info(str(exc))
            return False
        except Exception as exc:
            self.logger.error("Watch command failed: %s", exc)
            if self.verbose:
                import traceback
                traceback.print_exc()
            return False
