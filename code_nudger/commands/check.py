"""Check command - scan individual documents as if they were just saved."""

import logging
from typing import List, Optional

from ..annotations.service import ReminderService
from ..core.models import ScanConfig
from ..utils.notify import ConsoleNotifier, Notifier


class CheckCommand:
    """Command for scanning explicitly named files."""

    def __init__(self, config: ScanConfig, verbose: bool = False, notifier: Optional[Notifier] = None):
        self.config = config
        self.verbose = verbose
        self.notifier = notifier or ConsoleNotifier()
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, files: List[str]) -> bool:
        """
        Scan each file with per-document notifications enabled.

        The opt-out marker is not honoured here; it only applies to
        workspace scans.

        Returns:
            True if at least one reminder was found across all files
        """
        try:
            service = ReminderService(self.config, self.notifier)
            found_any = False
            for file_path in files:
                if service.on_document_saved(file_path):
                    found_any = True

            for reminder in service.store:
                print(f"  {reminder.file_name}:{reminder.line}  {reminder.date_str} {reminder.time_str}  {reminder.message}")

            return found_any

        except Exception as exc:
            self.logger.error("Check command failed: %s", exc)
            if self.verbose:
                import traceback
                traceback.print_exc()
            return False
