"""Known consumer tool skill directories and target validation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .models import SyncError, TargetDirectory
from .paths import resolve, same_object

KNOWN_TOOL_SKILL_DIRS: tuple[tuple[str, str], ...] = (
    ("claude", ".claude/skills"),
    ("opencode", ".config/opencode/skills"),
    ("cursor", ".cursor/skills"),
    ("openclaw", ".openclaw/skills"),
    ("codex", ".codex/skills"),
)

logger = logging.getLogger(__name__)

class TargetNotFound(SyncError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Target directory does not exist: {path}")
        self.path = path

class TargetIsSource(SyncError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Target directory is the source directory: {path}")
        self.path = path

class NoValidTargets(SyncError):
    def __init__(self) -> None:
        super().__init__("No valid target directories found")

@dataclass(frozen=True)
class TargetCandidate:
    name: str
    path: Path

def default_candidates(home: Optional[Path] = None) -> list[TargetCandidate]:
    base = home if home is not None else Path.home()
    return [TargetCandidate(name=name, path=base / rel) for name, rel in KNOWN_TOOL_SKILL_DIRS]

def explicit_target(path: Path, source_dir: Optional[Path] = None) -> TargetDirectory:
    path = path.expanduser()
    if not path.is_dir():
        raise TargetNotFound(path)
    if source_dir is not None and same_object(path, source_dir):
        raise TargetIsSource(path)
    return TargetDirectory(path=path, explicit=True)

def discover_targets(
    candidates: Iterable[TargetCandidate],
    source_dir: Optional[Path] = None,
) -> list[TargetDirectory]:
    targets: list[TargetDirectory] = []
    seen: set[str] = set()
    source_key = str(resolve(source_dir)) if source_dir is not None else None
    for candidate in candidates:
        path = candidate.path.expanduser()
        if not path.is_dir():
            logger.debug("Skipping %s: %s does not exist", candidate.name, path)
            continue
        key = str(resolve(path))
        if key == source_key:
            logger.warning("Skipping %s: %s is the source directory", candidate.name, path)
            continue
        if key in seen:
            logger.debug("Skipping %s: %s already targeted", candidate.name, path)
            continue
        seen.add(key)
        targets.append(TargetDirectory(path=path, label=candidate.name))
    return targets
