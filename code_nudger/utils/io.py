"""
File reading and JSON export helpers.
"""

import json
import os
import re
import tempfile
from pathlib import Path
from typing import Any, List


# Only CR, LF and CRLF end a line; other Unicode separators stay in the text.
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def read_text(file_path: str, encoding: str = "utf-8") -> str:
    """
    Read a whole text document.

    Raises:
        OSError: if the file cannot be opened
        UnicodeDecodeError: if the content is not valid for ``encoding``
    """
    with open(file_path, "r", encoding=encoding) as handle:
        return handle.read()


def split_document_lines(content: str) -> List[str]:
    """Split document text into lines without their terminators."""
    return LINE_BREAK_RE.split(content)


def safe_write_json(file_path: str, data: Any, indent: int = 2) -> bool:
    """
    Safely write JSON to file with atomic replace.

    Args:
        file_path: Path to write to
        data: Data to write
        indent: JSON indentation level

    Returns:
        True if successful, False otherwise
    """
    file_path = os.path.expanduser(file_path)
    path_obj = Path(file_path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            dir=str(path_obj.parent),
            prefix='.tmp_',
            suffix='.json',
            delete=False,
            encoding='utf-8'
        ) as tmp_file:
            json.dump(data, tmp_file, indent=indent, ensure_ascii=False)
            tmp_path = Path(tmp_file.name)

        os.replace(str(tmp_path), str(path_obj))
        return True

    except (OSError, TypeError, ValueError) as exc:
        print(f"Error writing to {file_path}: {exc}")
    finally:
        if tmp_path and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                pass

    return False
