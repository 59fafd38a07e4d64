"""Today command - show reminders scheduled for a given day."""

import logging
from datetime import date, datetime
from typing import Optional

from ..annotations.service import ReminderService
from ..annotations.today import format_items
from ..core.models import ScanConfig
from ..utils.date import parse_date
from ..utils.notify import CollectingNotifier, ConsoleNotifier, Notifier


class TodayCommand:
    """Command for listing the reminders that fall on one calendar day."""

    def __init__(self, config: ScanConfig, verbose: bool = False, notifier: Optional[Notifier] = None):
        self.config = config
        self.verbose = verbose
        self.notifier = notifier or ConsoleNotifier()
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, root: Optional[str] = None, date_str: Optional[str] = None) -> bool:
        """Scan quietly, then print the due-today view."""
        try:
            target = date.today()
            if date_str:
                target = parse_date(date_str)
                if target is None:
                    print(f"Invalid date '{date_str}'. Use YYYY-MM-DD.")
                    return False

            # Due warnings and the scan-complete notice would drown the list.
            quiet = CollectingNotifier()
            service = ReminderService(self.config, quiet)
            result = service.scan_workspace(root)
            if result is None:
                for message in quiet.infos:
                    self.notifier.info(message)
                return False

            items = service.due_today(target)
            print(format_items(items, target))

            if self.verbose:
                now = datetime.now()
                due = [r for r in service.store if r.is_due(now)]
                print(f"\n{len(due)} reminder(s) overdue or due now across the workspace.")

            return True

        except Exception as exc:
            self.logger.error("Today command failed: %s", exc)
            if self.verbose:
                import traceback
                traceback.print_exc()
            return False
