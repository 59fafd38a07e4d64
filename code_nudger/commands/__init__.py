"""
Command implementations for code-nudger.
"""

from .scan import ScanCommand
from .check import CheckCommand
from .today import TodayCommand
from .watch import WatchCommand
from .complete import CompleteCommand
from .config import ConfigCommand

__all__ = [
    'ScanCommand',
    'CheckCommand',
    'TodayCommand',
    'WatchCommand',
    'CompleteCommand',
    'ConfigCommand',
]
