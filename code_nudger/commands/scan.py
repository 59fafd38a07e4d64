"""Scan command - full workspace reminder scan."""

import logging
from datetime import date
from typing import Optional

from ..annotations.service import ReminderService
from ..annotations.today import format_items
from ..core.models import ScanConfig
from ..utils.io import safe_write_json
from ..utils.notify import ConsoleNotifier, Notifier


class ScanCommand:
    """Command for scanning the whole workspace for reminder annotations."""

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
        export_json: Optional[str] = None,
        show_today: bool = False,
    ) -> bool:
        """
        Run a full workspace scan.

        Args:
            root: Workspace root; falls back to the configured root
            export_json: Optional path to export the reminders as JSON
            show_today: Print the due-today view after scanning

        Returns:
            True if the workspace was scanned, False otherwise
        """
        try:
            service = ReminderService(self.config, self.notifier)
            result = service.scan_workspace(root)
            if result is None:
                return False

            print(
                f"\n📋 {result.reminders_found} reminder(s) in {result.files_scanned} file(s)"
                f" ({result.files_skipped} skipped, {result.files_failed} failed)"
            )
            if self.verbose:
                for path in result.failed_paths:
                    print(f"  ✗ {path}")

            if show_today:
                today = date.today()
                print("")
                print(format_items(service.due_today(today), today))

            if export_json:
                if not self._export_json(service, export_json):
                    return False
                print(f"\n📄 Reminders exported to: {export_json}")

            return True

        except Exception as exc:
            self.logger.error("Scan command failed: %s", exc)
            if self.verbose:
                import traceback
                traceback.print_exc()
            return False

    def _export_json(self, service: ReminderService, output_path: str) -> bool:
        """Export the scanned reminders to a JSON file."""
        reminders = service.store.all()
        return safe_write_json(output_path, {
            'reminders': [r.to_dict() for r in reminders],
            'summary': {
                'total': len(reminders),
                'invalid': sum(1 for r in reminders if not r.is_valid),
            },
        })
