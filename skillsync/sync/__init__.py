"""Symbolic-link mirroring of a skills directory into consumer tool directories."""

from .models import (
    SyncError,
    LinkEncoding,
    LinkRef,
    LinkKind,
    LinkState,
    SkillEntry,
    TargetDirectory,
    DecisionKind,
    Decision,
    RunCounters,
    TargetReport,
    RunReport,
)
from .paths import resolve, same_object
from .loader import SourceNotFound, list_entries
from .inspector import inspect_link, iter_symlinks
from .reconciler import reconcile, reconcile_entry, sweep_broken_links
from .discovery import (
    NoValidTargets,
    TargetCandidate,
    TargetIsSource,
    TargetNotFound,
    default_candidates,
    discover_targets,
    explicit_target,
)
from .manager import SyncManager

__all__ = [
    "SyncError",
    "LinkEncoding",
    "LinkRef",
    "LinkKind",
    "LinkState",
    "SkillEntry",
    "TargetDirectory",
    "DecisionKind",
    "Decision",
    "RunCounters",
    "TargetReport",
    "RunReport",
    "resolve",
    "same_object",
    "SourceNotFound",
    "list_entries",
    "inspect_link",
    "iter_symlinks",
    "reconcile",
    "reconcile_entry",
    "sweep_broken_links",
    "NoValidTargets",
    "TargetCandidate",
    "TargetIsSource",
    "TargetNotFound",
    "default_candidates",
    "discover_targets",
    "explicit_target",
    "SyncManager",
]
