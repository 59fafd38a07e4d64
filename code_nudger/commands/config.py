"""Config command - inspect and edit the persisted configuration."""

import json
import logging
import os
from typing import List, Optional

from ..core.exceptions import WorkspaceNotFoundError
from ..core.models import ScanConfig, normalize_extensions


class ConfigCommand:
    """Command for showing and changing persisted scan settings."""

    def __init__(self, config: ScanConfig, verbose: bool = False):
        self.config = config
        self.verbose = verbose
        self.changed = False
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(
        self,
        show: bool = False,
        set_root: Optional[str] = None,
        add_ext: Optional[List[str]] = None,
        remove_ext: Optional[List[str]] = None,
        prune_on_rescan: Optional[str] = None,
    ) -> bool:
        """
        Apply the requested edits to the config in place.

        The caller is responsible for saving when this returns True and
        ``changed`` is set.

        Returns:
            True if successful, False otherwise
        """
        self.changed = False

        if set_root:
            root = os.path.abspath(os.path.expanduser(set_root))
            if not os.path.isdir(root):
                raise WorkspaceNotFoundError(f"Workspace not found: {root}")
            self.config.workspace_root = root
            self.changed = True
            print(f"✓ Workspace root set to {root}")

        if add_ext:
            for ext in normalize_extensions(add_ext):
                if ext not in self.config.include_extensions:
                    self.config.include_extensions.append(ext)
                    self.changed = True
                    print(f"✓ Added extension .{ext}")

        if remove_ext:
            for ext in normalize_extensions(remove_ext):
                if ext in self.config.include_extensions:
                    self.config.include_extensions.remove(ext)
                    self.changed = True
                    print(f"✓ Removed extension .{ext}")

        if prune_on_rescan is not None:
            self.config.prune_on_rescan = prune_on_rescan == "on"
            self.changed = True
            print(f"✓ prune_on_rescan = {self.config.prune_on_rescan}")

        if show or not self.changed:
            print(json.dumps(self.config.to_dict(), indent=2))

        return True
