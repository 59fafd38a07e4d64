"""
Exception classes for code-nudger.
"""


class CodeNudgerError(Exception):
    """Base exception for all code-nudger errors."""
    pass


class ConfigurationError(CodeNudgerError):
    """Raised when configuration is invalid or missing."""
    pass


class WorkspaceNotFoundError(CodeNudgerError):
    """Raised when the workspace root cannot be found."""
    pass


class ScanError(CodeNudgerError):
    """Raised when a document cannot be scanned."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
