"""Terminal rendering of sync results."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from skillsync.sync.models import Decision, DecisionKind, RunReport, SkillEntry, TargetDirectory, TargetReport

HEAVY_RULE = "═" * 51
LIGHT_RULE = "━" * 40

class SyncConsole:
    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        verbose: bool = False,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)
        self.verbose = verbose

    def banner(self, preview: bool) -> None:
        self.console.print(HEAVY_RULE)
        self.console.print("🤖 Skill Sync Tool")
        self.console.print(HEAVY_RULE)
        self.console.print()
        if preview:
            self.console.print("[yellow]🔍 Dry run mode[/yellow]")

    def source(self, source: Path, entries: list[SkillEntry]) -> None:
        self.console.print(f"🔍 Source: {escape(str(source))}")
        self.console.print(f"🔍 Found {len(entries)} skill(s)")

    def targets(self, targets: list[TargetDirectory]) -> None:
        for target in targets:
            if target.explicit:
                self.console.print(f"📦 Target: {escape(str(target.path))}")
            else:
                label = escape(target.label or "")
                self.console.print(f"📦 Discovered target: {label} → {escape(str(target.path))}")

    def target_report(self, report: TargetReport) -> None:
        self.console.print()
        self.console.print(LIGHT_RULE)
        self.console.print(f"📂 Target: {escape(report.target.display_name)}")
        self.console.print(LIGHT_RULE)

        deleted = 0
        for decision in report.sweep:
            self.decision(decision)
            if decision.kind == DecisionKind.DELETED_BROKEN:
                deleted += 1
        if deleted:
            self.console.print(f"  Cleaned {deleted} broken link(s)")

        for decision in report.decisions:
            self.decision(decision)

    def decision(self, decision: Decision) -> None:
        name = escape(decision.name)
        detail = escape(decision.detail)
        kind = decision.kind
        if kind == DecisionKind.CREATED:
            self.console.print(f"  [blue]🔗 {name}[/blue] → {detail}")
            self._detail("create link")
        elif kind == DecisionKind.ALREADY_LINKED:
            self.console.print(f"  [green]✓ {name}[/green] (already linked)")
            self._detail(f"→ {detail}")
        elif kind == DecisionKind.SKIPPED_FOREIGN_LINK:
            self.console.print(f"  [yellow]⚠️  {name} (linked elsewhere: {detail})[/yellow]")
            self._detail("→ skipped")
        elif kind == DecisionKind.SKIPPED_OCCUPIED:
            self.console.print(f"  [yellow]⚠️  {name} (exists and is not a link)[/yellow]")
            self._detail("→ skipped")
        elif kind == DecisionKind.DELETED_BROKEN:
            shown = detail or "(target missing)"
            self.console.print(f"  [yellow]🗑️  remove broken link: {name} → {shown}[/yellow]")
        elif kind == DecisionKind.FAILED:
            self.error(f"{decision.name}: {decision.detail}")

    def summary(self, report: RunReport) -> None:
        counters = report.counters
        self.console.print()
        self.console.print(HEAVY_RULE)
        self.console.print("📊 Summary")
        self.console.print(HEAVY_RULE)
        self.console.print(f"  🔗 Created: {counters.created}")
        self.console.print(f"  ⚠️  Skipped: {counters.skipped}")
        self.console.print(f"  🗑️  Deleted: {counters.deleted}")
        self.console.print(f"  ❌ Failed: {counters.failed}")
        self.console.print("  " + "─" * 43)
        self.console.print(f"  Total: {counters.total} skill(s)")
        self.console.print(HEAVY_RULE)
        if report.preview:
            self.console.print()
            self.console.print("[yellow]💡 Dry run mode - nothing was changed[/yellow]")

    def error(self, message: str) -> None:
        self.error_console.print(f"  [red]❌ {escape(message)}[/red]")

    def _detail(self, message: str) -> None:
        if self.verbose:
            self.console.print(f"     📝 {message}")
