"""Mirror source skills into one target directory as symbolic links.

A run has two phases. The sweep removes every broken link in the target,
including links left behind by skills that no longer exist in the source.
Then each source entry is compared against what sits at ``target/name`` and
either confirmed, skipped, or linked.

Preview mode walks exactly the same code; the only difference is that the
filesystem calls are not made.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Container, Sequence

from .inspector import inspect_link, iter_symlinks
from .models import (
    Decision,
    DecisionKind,
    LinkKind,
    SkillEntry,
    TargetDirectory,
    TargetReport,
)
from .paths import same_object

logger = logging.getLogger(__name__)

def reconcile(
    target: TargetDirectory,
    entries: Sequence[SkillEntry],
    preview: bool = False,
) -> TargetReport:
    report = TargetReport(target=target)
    reclaimed = sweep_broken_links(target, preview, report)
    for entry in entries:
        report.record(reconcile_entry(target, entry, preview, reclaimed))
    return report

def sweep_broken_links(
    target: TargetDirectory,
    preview: bool,
    report: TargetReport,
) -> set[str]:
    """Delete broken links in ``target`` and return the names reclaimed."""
    reclaimed: set[str] = set()
    try:
        links = list(iter_symlinks(target.path))
    except OSError as err:
        logger.warning("Cannot list %s: %s", target.path, err)
        return reclaimed

    for link in links:
        try:
            state = inspect_link(link)
        except OSError as err:
            logger.warning("Cannot inspect %s: %s", link, err)
            continue
        if state.kind != LinkKind.BROKEN_LINK:
            continue

        if not preview:
            try:
                os.unlink(link)
            except OSError as err:
                logger.debug("Failed to remove broken link %s: %s", link, err)
                report.record(
                    Decision(DecisionKind.FAILED, link.name, link, f"remove broken link: {err}"),
                    sweep=True,
                )
                continue
            logger.info("Removed broken link %s -> %s", link, state.raw)

        reclaimed.add(link.name)
        report.record(
            Decision(DecisionKind.DELETED_BROKEN, link.name, link, state.raw),
            sweep=True,
        )
    return reclaimed

def reconcile_entry(
    target: TargetDirectory,
    entry: SkillEntry,
    preview: bool,
    reclaimed: Container[str] = (),
) -> Decision:
    link = target.path / entry.name
    try:
        state = inspect_link(link)
    except OSError as err:
        logger.debug("Cannot inspect %s: %s", link, err)
        return Decision(DecisionKind.FAILED, entry.name, link, f"inspect: {err}")

    if state.kind == LinkKind.OCCUPIED:
        return Decision(DecisionKind.SKIPPED_OCCUPIED, entry.name, link)

    if state.kind == LinkKind.VALID_LINK:
        if same_object(state.target, entry.source_path):
            return Decision(DecisionKind.ALREADY_LINKED, entry.name, link, str(entry.source_path))
        return Decision(DecisionKind.SKIPPED_FOREIGN_LINK, entry.name, link, str(state.target))

    if state.kind == LinkKind.BROKEN_LINK and entry.name not in reclaimed:
        return Decision(
            DecisionKind.FAILED,
            entry.name,
            link,
            f"broken link could not be removed: {state.raw}",
        )

    return create_link(entry, link, preview)

def create_link(entry: SkillEntry, link: Path, preview: bool) -> Decision:
    source = str(entry.source_path)
    if not preview:
        try:
            os.symlink(source, link, target_is_directory=entry.source_path.is_dir())
        except OSError as err:
            logger.debug("Failed to link %s -> %s: %s", link, source, err)
            return Decision(DecisionKind.FAILED, entry.name, link, f"create link: {err}")
        logger.debug("Linked %s -> %s", link, source)
    return Decision(DecisionKind.CREATED, entry.name, link, source)
