"""Models for the skill link reconciliation engine."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

ABSOLUTE_MARKER = "abs:"

class SyncError(Exception):
    """Base class for errors that abort a whole sync run."""

class LinkEncoding(str, Enum):
    MARKER_ABSOLUTE = "marker_absolute"
    PLAIN_ABSOLUTE = "plain_absolute"
    RELATIVE = "relative"

@dataclass(frozen=True)
class LinkRef:
    """The text stored in a symbolic link, parsed once."""
    encoding: LinkEncoding
    raw: str
    path: str

    @staticmethod
    def parse(raw: str) -> "LinkRef":
        if raw.startswith(ABSOLUTE_MARKER):
            return LinkRef(LinkEncoding.MARKER_ABSOLUTE, raw, raw[len(ABSOLUTE_MARKER):])
        if os.path.isabs(raw):
            return LinkRef(LinkEncoding.PLAIN_ABSOLUTE, raw, raw)
        return LinkRef(LinkEncoding.RELATIVE, raw, raw)

    def referent(self, link_dir: Path) -> Optional[Path]:
        if not self.path:
            return None
        if self.encoding == LinkEncoding.RELATIVE:
            return link_dir / self.path
        return Path(self.path)

class LinkKind(str, Enum):
    ABSENT = "absent"
    VALID_LINK = "valid_link"
    BROKEN_LINK = "broken_link"
    OCCUPIED = "occupied"

@dataclass(frozen=True)
class LinkState:
    kind: LinkKind
    target: Optional[Path] = None
    raw: str = ""

    @staticmethod
    def absent() -> "LinkState":
        return LinkState(LinkKind.ABSENT)

    @staticmethod
    def valid(resolved_target: Path) -> "LinkState":
        return LinkState(LinkKind.VALID_LINK, target=resolved_target)

    @staticmethod
    def broken(raw: str) -> "LinkState":
        return LinkState(LinkKind.BROKEN_LINK, raw=raw)

    @staticmethod
    def occupied() -> "LinkState":
        return LinkState(LinkKind.OCCUPIED)

@dataclass(frozen=True)
class SkillEntry:
    name: str
    source_path: Path

@dataclass(frozen=True)
class TargetDirectory:
    path: Path
    label: Optional[str] = None
    explicit: bool = False

    @property
    def display_name(self) -> str:
        if self.path.name == "skills" and self.path.parent.name:
            return f"{self.path.parent.name}/{self.path.name}"
        return self.path.name or str(self.path)

class DecisionKind(str, Enum):
    CREATED = "created"
    ALREADY_LINKED = "already_linked"
    SKIPPED_FOREIGN_LINK = "skipped_foreign_link"
    SKIPPED_OCCUPIED = "skipped_occupied"
    DELETED_BROKEN = "deleted_broken"
    FAILED = "failed"

@dataclass(frozen=True)
class Decision:
    kind: DecisionKind
    name: str
    path: Path
    detail: str = ""

@dataclass(frozen=True)
class RunCounters:
    created: int = 0
    skipped: int = 0
    deleted: int = 0
    failed: int = 0

    def __add__(self, other: "RunCounters") -> "RunCounters":
        return RunCounters(
            created=self.created + other.created,
            skipped=self.skipped + other.skipped,
            deleted=self.deleted + other.deleted,
            failed=self.failed + other.failed,
        )

    @property
    def total(self) -> int:
        return self.created + self.skipped + self.failed

_COUNTER_FIELDS = {
    DecisionKind.CREATED: "created",
    DecisionKind.SKIPPED_FOREIGN_LINK: "skipped",
    DecisionKind.SKIPPED_OCCUPIED: "skipped",
    DecisionKind.DELETED_BROKEN: "deleted",
    DecisionKind.FAILED: "failed",
}

@dataclass
class TargetReport:
    target: TargetDirectory
    sweep: list[Decision] = field(default_factory=list)
    decisions: list[Decision] = field(default_factory=list)
    counters: RunCounters = field(default_factory=RunCounters)

    def record(self, decision: Decision, *, sweep: bool = False) -> None:
        (self.sweep if sweep else self.decisions).append(decision)
        counter = _COUNTER_FIELDS.get(decision.kind)
        if counter is not None:
            self.counters = self.counters + RunCounters(**{counter: 1})

    @property
    def actions(self) -> list[Decision]:
        return [*self.sweep, *self.decisions]

@dataclass
class RunReport:
    source: Path
    entries: list[SkillEntry] = field(default_factory=list)
    preview: bool = False
    targets: list[TargetReport] = field(default_factory=list)

    @property
    def counters(self) -> RunCounters:
        return sum((report.counters for report in self.targets), RunCounters())

    def ok(self, strict: bool = False) -> bool:
        return not (strict and self.counters.failed > 0)
