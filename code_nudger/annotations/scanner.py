"""Per-document reminder scanning."""

import logging
import os
from datetime import datetime
from typing import Callable, List, Optional

from ..core.exceptions import ScanError
from ..core.models import DEFAULT_TIME, Reminder, ReminderStore
from ..utils.io import read_text, split_document_lines
from ..utils.notify import Notifier
from .parser import parse_reminder_line


class DocumentScanner:
    """Applies the annotation parser to every line of one document."""

    def __init__(
        self,
        store: ReminderStore,
        notifier: Notifier,
        clock: Callable[[], datetime] = datetime.now,
        default_time: str = DEFAULT_TIME,
        report_invalid_dates: bool = True,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.notifier = notifier
        self.clock = clock
        self.default_time = default_time
        self.report_invalid_dates = report_invalid_dates
        self.logger = logger or logging.getLogger(__name__)

    def scan_lines(self, file_path: str, lines: List[str], notify: bool) -> bool:
        """
        Scan the lines of one document and record every reminder found.

        Due reminders are reported to the notifier as they are found.

        Args:
            file_path: Absolute path of the document
            lines: Document lines in order
            notify: Report "no reminders found" for this document

        Returns:
            True if at least one reminder was found
        """
        file_name = os.path.basename(file_path)
        now = self.clock()
        found = False

        for index, text in enumerate(lines):
            parsed = parse_reminder_line(text, self.default_time)
            if parsed is None:
                continue

            found = True
            line_number = index + 1
            reminder = Reminder(
                file=file_path,
                line=line_number,
                message=parsed.message,
                scheduled=parsed.scheduled,
                date_str=parsed.date_str,
                time_str=parsed.time_str,
            )
            self.store.add(reminder)

            if not reminder.is_valid:
                self.logger.warning(
                    "Unparseable reminder date in %s:%d: %s [%s]",
                    file_path, line_number, parsed.date_str, parsed.time_str,
                )
                if self.report_invalid_dates:
                    self.notifier.warning(
                        f"Invalid reminder date in {file_name} (Line {line_number}): "
                        f"{parsed.date_str} [{parsed.time_str}]"
                    )
                continue

            if reminder.is_due(now):
                self.notifier.warning(
                    f"Reminder due in {file_name} (Line {line_number}): {reminder.message}"
                )

        if not found and notify:
            self.notifier.info(f"No reminders found in {file_name}.")

        self.logger.debug("Scanned %s (%d lines, found=%s)", file_path, len(lines), found)
        return found

    def scan_file(self, file_path: str, notify: bool) -> bool:
        """
        Read a document from disk and scan it.

        Raises:
            ScanError: if the file cannot be read or decoded
        """
        file_path = os.path.abspath(file_path)
        content = self.read_document(file_path)
        return self.scan_lines(file_path, split_document_lines(content), notify)

    def read_document(self, file_path: str) -> str:
        try:
            return read_text(file_path)
        except (OSError, UnicodeDecodeError) as exc:
            raise ScanError(file_path, str(exc)) from exc
