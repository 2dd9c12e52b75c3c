"""Link-aware inspection of entries inside a target directory."""
from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterator

from .models import LinkRef, LinkState
from .paths import resolve

def inspect_link(path: Path) -> LinkState:
    """Classify ``path`` without following it first.

    ``lstat`` is used before anything else; a dereferencing stat would report a
    valid link to a directory as the directory itself.
    """
    try:
        st = os.lstat(path)
    except (FileNotFoundError, NotADirectoryError):
        return LinkState.absent()

    if not stat.S_ISLNK(st.st_mode):
        return LinkState.occupied()

    try:
        raw = os.readlink(path)
    except OSError:
        return LinkState.broken("")
    if not raw:
        return LinkState.broken("")

    referent = LinkRef.parse(raw).referent(path.parent)
    if referent is None or not os.path.exists(referent):
        return LinkState.broken(raw)
    return LinkState.valid(resolve(referent))

def iter_symlinks(directory: Path) -> Iterator[Path]:
    with os.scandir(directory) as it:
        names = sorted(entry.name for entry in it if entry.is_symlink())
    for name in names:
        yield directory / name
