"""
Centralized path management for code-nudger.

Resolves the per-user working directory that holds the configuration file.
"""

import os
import sys
from pathlib import Path
from typing import Optional
import logging


class PathManager:
    """Manages code-nudger file paths."""

    APP_DIR_NAME = "code-nudger"
    HOME_ENV_VAR = "CODE_NUDGER_HOME"

    CONFIG_FILE = "config.json"

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._working_dir: Optional[Path] = None

    def _default_user_dir(self) -> Path:
        """Platform-appropriate per-user config directory."""
        if sys.platform == "darwin":
            return Path.home() / "Library" / "Application Support" / self.APP_DIR_NAME
        if sys.platform.startswith("win"):
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / self.APP_DIR_NAME
            return Path.home() / "AppData" / "Roaming" / self.APP_DIR_NAME
        return Path.home() / ".config" / self.APP_DIR_NAME

    @property
    def working_dir(self) -> Path:
        """
        Get the working directory for code-nudger data.

        Priority order:
        1. CODE_NUDGER_HOME environment variable (explicit override)
        2. Platform user config directory
        """
        if self._working_dir is not None:
            return self._working_dir

        env_override = os.environ.get(self.HOME_ENV_VAR)
        if env_override:
            self._working_dir = Path(env_override).expanduser().resolve()
            self.logger.debug(f"Using {self.HOME_ENV_VAR} override: {self._working_dir}")
        else:
            self._working_dir = self._default_user_dir()
            self.logger.debug(f"Using user config directory: {self._working_dir}")

        return self._working_dir

    def ensure_directories(self) -> None:
        """Ensure the working directory exists."""
        self.working_dir.mkdir(parents=True, exist_ok=True)
        self.logger.debug(f"Ensured directory exists: {self.working_dir}")

    @property
    def config_path(self) -> Path:
        """Get the configuration file path."""
        return self.working_dir / self.CONFIG_FILE


# Global instance
_path_manager: Optional[PathManager] = None


def get_path_manager() -> PathManager:
    """Get or create the global PathManager instance."""
    global _path_manager
    if _path_manager is None:
        _path_manager = PathManager()
    return _path_manager


def reset_path_manager() -> None:
    """Drop the cached PathManager so environment changes are picked up."""
    global _path_manager
    _path_manager = None
