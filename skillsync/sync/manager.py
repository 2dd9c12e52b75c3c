"""Runs the reconciler once per target and aggregates the results."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .discovery import NoValidTargets, TargetCandidate, default_candidates, discover_targets, explicit_target
from .loader import list_entries
from .models import RunReport, SkillEntry, TargetDirectory
from .reconciler import reconcile

logger = logging.getLogger(__name__)

class SyncManager:
    def __init__(
        self,
        source_dir: Path,
        candidates: Optional[Iterable[TargetCandidate]] = None,
    ) -> None:
        self._source_dir = source_dir.expanduser()
        self._candidates = list(candidates) if candidates is not None else default_candidates()

    @property
    def source_dir(self) -> Path:
        return self._source_dir

    def resolve_targets(self, target: Optional[Path] = None) -> list[TargetDirectory]:
        if target is not None:
            return [explicit_target(target, self._source_dir)]
        targets = discover_targets(self._candidates, self._source_dir)
        if not targets:
            raise NoValidTargets()
        return targets

    def load_entries(self) -> list[SkillEntry]:
        return list_entries(self._source_dir)

    def run(self, target: Optional[Path] = None, preview: bool = False) -> RunReport:
        # Source errors must surface before any target is looked at.
        entries = self.load_entries()
        return self.sync(entries, self.resolve_targets(target), preview)

    def sync(
        self,
        entries: list[SkillEntry],
        targets: list[TargetDirectory],
        preview: bool = False,
    ) -> RunReport:
        report = RunReport(source=self._source_dir, entries=entries, preview=preview)
        for target_dir in targets:
            logger.debug("Reconciling %d skill(s) into %s", len(entries), target_dir.path)
            report.targets.append(reconcile(target_dir, entries, preview))
        return report
