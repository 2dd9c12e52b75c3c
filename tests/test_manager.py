from __future__ import annotations
from pathlib import Path
import os
import sys
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from skillsync.sync.discovery import (
    KNOWN_TOOL_SKILL_DIRS,
    NoValidTargets,
    TargetCandidate,
    TargetIsSource,
    TargetNotFound,
    default_candidates,
    discover_targets,
)
from skillsync.sync.loader import SourceNotFound
from skillsync.sync.manager import SyncManager
from skillsync.sync.models import DecisionKind, RunCounters, TargetDirectory

def make_source(root: Path, *names: str) -> Path:
    source = root / "source"
    source.mkdir(parents=True, exist_ok=True)
    for name in names:
        (source / name).mkdir()
    return source

def test_default_candidates_cover_known_tools(tmp_path: Path) -> None:
    candidates = default_candidates(tmp_path)
    assert [candidate.name for candidate in candidates] == [name for name, _ in KNOWN_TOOL_SKILL_DIRS]
    assert candidates[0].path == tmp_path / ".claude" / "skills"

def test_discovery_skips_missing_duplicate_and_source(tmp_path: Path) -> None:
    source = make_source(tmp_path, "alpha")
    claude = tmp_path / ".claude" / "skills"
    claude.mkdir(parents=True)
    os.symlink(claude, tmp_path / "claude-alias")

    targets = discover_targets(
        [
            TargetCandidate("claude", claude),
            TargetCandidate("cursor", tmp_path / ".cursor" / "skills"),
            TargetCandidate("alias", tmp_path / "claude-alias"),
            TargetCandidate("self", source),
        ],
        source,
    )
    assert targets == [TargetDirectory(path=claude, label="claude")]

def test_run_syncs_every_discovered_target(tmp_path: Path) -> None:
    source = make_source(tmp_path, "alpha", "beta")
    first = tmp_path / "one" / "skills"
    second = tmp_path / "two" / "skills"
    first.mkdir(parents=True)
    second.mkdir(parents=True)
    (second / "beta").mkdir()

    manager = SyncManager(source, [TargetCandidate("one", first), TargetCandidate("two", second)])
    report = manager.run()

    assert [target.target.label for target in report.targets] == ["one", "two"]
    assert report.counters == RunCounters(created=3, skipped=1)
    assert [decision.kind for decision in report.targets[1].decisions] == [
        DecisionKind.CREATED,
        DecisionKind.SKIPPED_OCCUPIED,
    ]

def test_explicit_target_disables_discovery(tmp_path: Path) -> None:
    source = make_source(tmp_path, "alpha")
    discovered = tmp_path / "discovered"
    discovered.mkdir()
    explicit = tmp_path / "explicit"
    explicit.mkdir()

    report = SyncManager(source, [TargetCandidate("d", discovered)]).run(target=explicit)

    assert [target.target.path for target in report.targets] == [explicit]
    assert report.targets[0].target.explicit
    assert list(discovered.iterdir()) == []

def test_missing_explicit_target_is_fatal(tmp_path: Path) -> None:
    source = make_source(tmp_path, "alpha")
    with pytest.raises(TargetNotFound):
        SyncManager(source, []).run(target=tmp_path / "missing")

def test_explicit_target_equal_to_source_is_fatal(tmp_path: Path) -> None:
    source = make_source(tmp_path, "alpha")
    with pytest.raises(TargetIsSource):
        SyncManager(source, []).run(target=source)

def test_no_targets_is_fatal(tmp_path: Path) -> None:
    source = make_source(tmp_path, "alpha")
    with pytest.raises(NoValidTargets):
        SyncManager(source, [TargetCandidate("x", tmp_path / "missing")]).run()

def test_missing_source_aborts_before_targets(tmp_path: Path) -> None:
    target = tmp_path / "target"
    target.mkdir()
    os.symlink(tmp_path / "gone", target / "stale")

    with pytest.raises(SourceNotFound):
        SyncManager(tmp_path / "missing", [TargetCandidate("t", target)]).run()
    assert os.path.lexists(target / "stale")

def test_preview_run_reports_without_mutation(tmp_path: Path) -> None:
    source = make_source(tmp_path, "alpha")
    target = tmp_path / "target"
    target.mkdir()

    report = SyncManager(source, [TargetCandidate("t", target)]).run(preview=True)

    assert report.preview
    assert report.counters == RunCounters(created=1)
    assert list(target.iterdir()) == []

def test_strict_exit_status(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = make_source(tmp_path, "alpha")
    target = tmp_path / "target"
    target.mkdir()

    def refuse(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(os, "symlink", refuse)
    report = SyncManager(source, [TargetCandidate("t", target)]).run()

    assert report.counters.failed == 1
    assert report.ok()
    assert not report.ok(strict=True)

def test_steps_can_be_run_separately(tmp_path: Path) -> None:
    source = make_source(tmp_path, "alpha")
    target = tmp_path / "target"
    target.mkdir()
    manager = SyncManager(source, [TargetCandidate("t", target)])

    entries = manager.load_entries()
    targets = manager.resolve_targets()
    report = manager.sync(entries, targets)

    assert [entry.name for entry in entries] == ["alpha"]
    assert report.entries == entries
    assert report.counters == RunCounters(created=1)
