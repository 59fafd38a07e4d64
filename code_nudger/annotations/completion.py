"""Snippet completion for reminder annotations."""

import re
from dataclasses import dataclass
from typing import Any, Dict, List


TRIGGER_CHARACTER = "@"
COMPLETION_PREFIX = "@rem"

SNIPPET_TEMPLATE = "@reminder ${1:YYYY-MM-DD} [${2:HH:MM}]: ${3:Reminder message}"

# Matches ${N:placeholder} tab stops
_TAB_STOP_RE = re.compile(r"\$\{(\d+):([^}]*)\}")


@dataclass
class CompletionItem:
    """A single completion suggestion offered to an editor."""

    label: str
    kind: str
    insert_text: str
    detail: str
    documentation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "kind": self.kind,
            "insert_text": self.insert_text,
            "detail": self.detail,
            "documentation": self.documentation,
        }


def reminder_snippet() -> CompletionItem:
    return CompletionItem(
        label="@reminder snippet",
        kind="snippet",
        insert_text=SNIPPET_TEMPLATE,
        detail="Insert a reminder annotation",
        documentation="Annotation format: `// @reminder YYYY-MM-DD [HH:MM]: Reminder message`",
    )


def complete_annotation(line_prefix: str) -> List[CompletionItem]:
    """
    Offer the reminder snippet when the line being typed starts with ``@rem``.

    Args:
        line_prefix: Text of the current line up to the cursor

    Returns:
        A one-element list with the snippet, or an empty list
    """
    if not line_prefix.strip().startswith(COMPLETION_PREFIX):
        return []
    return [reminder_snippet()]


def render_snippet(item: CompletionItem, *values: str) -> str:
    """
    Fill a snippet's tab stops in order.

    Tab stops without a matching value keep their placeholder text.
    """
    def _replace(match):
        index = int(match.group(1)) - 1
        if 0 <= index < len(values) and values[index]:
            return values[index]
        return match.group(2)

    return _TAB_STOP_RE.sub(_replace, item.insert_text)
