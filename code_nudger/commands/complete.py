"""Complete command - snippet suggestions for an editor bridge."""

import json
import logging
from typing import Optional

from ..annotations.completion import complete_annotation, render_snippet


class CompleteCommand:
    """Prints completion items for the text typed so far on a line."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(
        self,
        line_prefix: str,
        date_str: Optional[str] = None,
        time_str: Optional[str] = None,
        message: Optional[str] = None,
    ) -> bool:
        """
        Print matching completion items as JSON.

        When any of date, time or message is given the filled-in
        annotation is printed instead.

        Returns:
            True if a completion was offered
        """
        items = complete_annotation(line_prefix)
        if not items:
            self.logger.debug("No completion for prefix %r", line_prefix)
            return False

        if date_str or time_str or message:
            print("// " + render_snippet(items[0], date_str or "", time_str or "", message or ""))
        else:
            print(json.dumps([item.to_dict() for item in items], indent=2))
        return True
