"""
Test suite for code-nudger.

This package contains:
- Unit tests for annotation parsing and document scanning
- Workspace scan and watcher tests against temporary trees
- CLI dispatch tests with mocked commands
"""
