from __future__ import annotations

import logging
import os
from pathlib import Path

from .models import SkillEntry, SyncError
from .paths import resolve

HIDDEN_PREFIX = "."

logger = logging.getLogger(__name__)

class SourceNotFound(SyncError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Source directory does not exist: {path}")
        self.path = path

def list_entries(source_dir: Path) -> list[SkillEntry]:
    """Return the visible immediate children of ``source_dir`` sorted by name."""
    if not source_dir.is_dir():
        raise SourceNotFound(source_dir)

    try:
        with os.scandir(source_dir) as it:
            names = sorted(entry.name for entry in it if not is_hidden(entry.name))
    except OSError as err:
        raise SourceNotFound(source_dir) from err

    entries: list[SkillEntry] = []
    for name in names:
        path = source_dir / name
        if path.is_symlink() and not path.exists():
            logger.warning("Skipping dangling source entry %s", path)
            continue
        entries.append(SkillEntry(name=name, source_path=resolve(path)))
    return entries

def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)
