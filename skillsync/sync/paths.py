"""Path canonicalization used for every identity comparison."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

def resolve(path: PathLike) -> Path:
    expanded = os.path.expanduser(os.fspath(path))
    try:
        return Path(expanded).resolve(strict=True)
    except (OSError, RuntimeError):
        return Path(os.path.abspath(expanded))

def same_object(a: PathLike, b: PathLike) -> bool:
    return str(resolve(a)) == str(resolve(b))
