"""Command line entry point for skill-sync."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from skillsync.config import load_config
from skillsync.sync.manager import SyncManager
from skillsync.sync.models import SyncError
from skillsync.ui.console import SyncConsole

EXAMPLES = """\
examples:
  skill-sync                          sync every known tool directory
  skill-sync -d                       preview all sync actions
  skill-sync -s ~/my-skills           use a custom source directory
  skill-sync -t ~/.claude/skills      sync a single tool directory only
"""

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skill-sync",
        description="Sync skills from a source directory to multiple AI tools via symlinks.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-s", "--source", type=Path, help="source skills directory (default: ~/.agents/skills)")
    parser.add_argument("-t", "--target", type=Path, help="single target tool skills directory")
    parser.add_argument("-d", "--dry-run", action="store_true", help="preview mode, change nothing")
    parser.add_argument("-v", "--verbose", action="store_true", help="show detailed logs")
    parser.add_argument("-c", "--config", type=Path, help="path to a YAML config file")
    parser.add_argument("--strict", action="store_true", help="exit non-zero when any link operation failed")
    return parser

def setup_logging(verbose: bool, console: Optional[Console] = None) -> None:
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("skillsync")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

def main(
    argv: Optional[Sequence[str]] = None,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
) -> int:
    args = build_parser().parse_args(argv)
    out = SyncConsole(console=console, error_console=error_console, verbose=args.verbose)
    setup_logging(args.verbose, out.error_console)

    try:
        config = load_config(args.config)
        manager = SyncManager(args.source or config.source, config.candidates())
        out.banner(args.dry_run)
        entries = manager.load_entries()
        out.source(manager.source_dir, entries)
        targets = manager.resolve_targets(args.target)
    except SyncError as err:
        out.error(str(err))
        return 1

    out.targets(targets)
    report = manager.sync(entries, targets, preview=args.dry_run)
    for target_report in report.targets:
        out.target_report(target_report)
    out.summary(report)

    strict = args.strict or config.strict
    return 0 if report.ok(strict) else 1

if __name__ == "__main__":
    raise SystemExit(main())
