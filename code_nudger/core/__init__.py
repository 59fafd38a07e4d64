"""
Core module for code-nudger - contains domain models, configuration, and exceptions.
"""

from .models import (
    ParsedAnnotation,
    Reminder,
    ReminderStore,
    ScanConfig,
    WorkspaceScanResult,
)

from .exceptions import (
    CodeNudgerError,
    ConfigurationError,
    WorkspaceNotFoundError,
    ScanError,
)

__all__ = [
    # Models
    'ParsedAnnotation',
    'Reminder',
    'ReminderStore',
    'ScanConfig',
    'WorkspaceScanResult',
    # Exceptions
    'CodeNudgerError',
    'ConfigurationError',
    'WorkspaceNotFoundError',
    'ScanError',
]
