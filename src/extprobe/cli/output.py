"""Rich terminal output layer for check runs.

Provides the live per-check narration line, the summary table shown at
the end of a run, and pure JSON output for CI consumption.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from extprobe.report.builder import dump_outcomes

if TYPE_CHECKING:
    from extprobe.models.outcome import CheckOutcome, RunReport


# Status styling map: status value -> (symbol, Rich markup style)
_STATUS_STYLES: dict[str, tuple[str, str]] = {
    "passed": ("✓", "bold green"),
    "failed": ("✗", "bold red"),
}

_VERDICT_STYLES: dict[bool, tuple[str, str]] = {
    False: ("✓ PASS", "bold green"),
    True: ("✗ FAIL", "bold red"),
}


def render_outcome(outcome: CheckOutcome, console: Console) -> None:
    """Print a one-line narration for a completed check.

    Args:
        outcome: The outcome just recorded.
        console: Rich Console for output.
    """
    symbol, style = _STATUS_STYLES[outcome.status.value]
    line = f"[{style}]{symbol}[/{style}] {escape(outcome.name)}"
    if outcome.duration_ms:
        line += f" [dim]({outcome.duration_ms}ms)[/dim]"
    if outcome.error:
        line += f": [red]{escape(outcome.error)}[/red]"
    elif outcome.details:
        line += f": {escape(outcome.details)}"
    console.print(line)


def render_summary(report: RunReport, console: Console) -> None:
    """Render a compact key-value summary table for the run.

    Args:
        report: The aggregated run.
        console: Rich Console for output.
    """
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")

    symbol, style = _VERDICT_STYLES[report.has_failures]
    table.add_row("Verdict", f"[{style}]{symbol}[/{style}]")
    table.add_row("Checks", f"{report.passed_count}/{report.total_count} passed")
    if report.failed_count:
        table.add_row("Failed", str(report.failed_count))
    table.add_row("Duration", f"{report.total_duration_ms}ms")

    console.print()
    console.print(table)


def output_json(report: RunReport) -> None:
    """Write the outcome array as pure JSON to stdout.

    No Rich markup, no color, no extra text. Same shape as the results
    artifact.
    """
    sys.stdout.write(dump_outcomes(report.outcomes))
