#!/usr/bin/env python3
"""
Global pytest configuration and fixtures.

This module provides:
- Temporary workspace fixtures with annotated source files
- A fixed clock for deterministic due checks
- Isolation of the per-user config directory
"""

import os
import sys
import tempfile
import shutil
from datetime import datetime
from typing import Callable, Generator

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from code_nudger.core.paths import reset_path_manager


FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0)


def write_file(path: str, content: str) -> str:
    """Write a text file, creating parent directories."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(content)
    return path


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch) -> Generator[str, None, None]:
    """Point the config directory at a throwaway location."""
    home = tmp_path / "code-nudger-home"
    monkeypatch.setenv("CODE_NUDGER_HOME", str(home))
    reset_path_manager()
    yield str(home)
    reset_path_manager()


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = tempfile.mkdtemp(prefix="code_nudger_test_")
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock pinned to 2024-06-01 12:00 local time."""
    return lambda: FIXED_NOW


@pytest.fixture
def mock_workspace(temp_dir: str) -> str:
    """Create a small workspace with annotated and ignored files."""
    root = os.path.join(temp_dir, "workspace")

    write_file(os.path.join(root, "src", "app.py"), """import os

# @reminder lines need a // comment, this one is ignored
def main():
    pass  // @reminder 2024-05-01: Remove legacy flag
// @reminder 2024-06-01 [14:30]: Call vendor
""")

    write_file(os.path.join(root, "src", "server.ts"), """// @reminder 2024-06-01: Rotate API keys
export const port = 8080;
// @reminder 2024-07-15 [08:00]: Upgrade runtime
""")

    write_file(os.path.join(root, "lib", "opted_out.js"), """// @excludeScan
// @reminder 2024-01-01: Should never be reported
""")

    write_file(os.path.join(root, "node_modules", "dep", "index.js"), """// @reminder 2024-01-01: Vendored code
""")

    write_file(os.path.join(root, "build", "out.js"), """// @reminder 2024-01-01: Build artefact
""")

    write_file(os.path.join(root, "README.md"), """// @reminder 2024-01-01: Not a source file
""")

    return root
