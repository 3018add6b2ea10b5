"""Local file-system adapter (file existence oracle)."""

from __future__ import annotations

import os
from pathlib import Path


class LocalFileSystem:
    def exists(self, path) -> bool:
        try:
            return Path(path).is_file()
        except (OSError, TypeError, ValueError):
            return False

    def full_name(self, path) -> str:
        return os.path.abspath(os.fspath(path))
