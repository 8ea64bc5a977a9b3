"""Aggregation and rendering of update outcomes."""

import os
from datetime import date
from pathlib import Path

from .models import Report, UpdateOutcome

REGRESSION_MARKER = "⚠️ PACKAGE RETROCEDED ! "
NO_UPDATES_LINE = "No new versions found."


class ReportAggregator:
    """Collects outcomes in discovery order, grouped by sub-repository."""

    def __init__(self, scan_root: str | Path):
        self.scan_root = Path(scan_root)
        self.outcomes: list[UpdateOutcome] = []

    def __len__(self) -> int:
        return len(self.outcomes)

    def group_for(self, file_path: str | Path) -> str:
        """Return the first directory segment of a manifest below the root."""
        rel_dir = os.path.relpath(Path(file_path).parent, self.scan_root)
        return Path(rel_dir).parts[0] if rel_dir != "." else "."

    def add(self, outcome: UpdateOutcome) -> None:
        self.outcomes.append(outcome)

    def build(self, run_date: date | None = None) -> Report:
        return Report(run_date=run_date or date.today(), outcomes=list(self.outcomes))


def format_outcome(outcome: UpdateOutcome) -> str:
    """Format a single outcome as one report line."""
    line = (
        f"`- {outcome.repo_group}/{outcome.package_name} "
        f"{outcome.current_version} → {outcome.latest_version}`"
    )
    if outcome.is_regression:
        return REGRESSION_MARKER + line
    return line


def render_report(report: Report, mention: str | None = None) -> str:
    """Render a report as message text, one outcome per line."""
    lines = []
    if mention:
        lines.append(mention)
    lines.append(f"# Repository Checklist [{report.run_date.strftime('%d %B %Y')}]")

    if not report.has_updates:
        lines.append(NO_UPDATES_LINE)
    else:
        lines.extend(format_outcome(outcome) for outcome in report.outcomes)

    return "\n".join(lines)
