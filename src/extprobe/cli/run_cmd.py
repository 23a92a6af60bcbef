"""extprobe run -- execute the check battery and write the reports.

Loads extprobe.yaml, optionally stages the extension from a source
tree, launches Chromium with the extension, runs every check with live
narration, writes the results JSON and HTML report, and exits with the
run's pass/fail code.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from functools import partial
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from extprobe.checks import build_checks
from extprobe.cli.output import output_json, render_outcome, render_summary
from extprobe.cli.project import is_ci, load_project, resolve_path
from extprobe.errors import SinkError
from extprobe.execution.browser import launch_session
from extprobe.execution.runner import CheckRunner
from extprobe.execution.staging import stage_extension, verify_required_files
from extprobe.report.builder import build_report
from extprobe.storage.report_store import ReportWriter

# Writing an artifact failed: an infrastructure error, not a test failure.
EXIT_SINK_ERROR = 3


def run(
    extension_dir: Optional[str] = typer.Option(
        None, "--extension-dir", "-e", help="Extension directory (default: from config)"
    ),
    stage_from: Optional[str] = typer.Option(
        None, "--stage-from", help="Stage extension files from this source tree first"
    ),
    budget: Optional[float] = typer.Option(
        None, "--budget", help="Overall run budget in seconds"
    ),
    headed: bool = typer.Option(False, "--headed", help="Show the browser window"),
    format_json: bool = typer.Option(
        False, "--json", "--format-json", help="Output pure JSON to stdout"
    ),
) -> None:
    """Run the extension checks and write the JSON and HTML reports."""
    asyncio.run(
        _run_async(
            extension_dir=extension_dir,
            stage_from=stage_from,
            budget=budget,
            headed=headed,
            format_json=format_json,
        )
    )


async def _run_async(
    *,
    extension_dir: str | None,
    stage_from: str | None,
    budget: float | None,
    headed: bool,
    format_json: bool,
) -> None:
    """Async implementation of the run command."""
    console = Console(stderr=True)

    # 1. Load config
    project_root, config = load_project(console)
    if is_ci(config):
        console = Console(stderr=True, no_color=True)
    if headed:
        config = config.model_copy(
            update={"browser": config.browser.model_copy(update={"headless": False})}
        )

    # 2. Preflight: optional staging, then required-file verification
    ext_dir = resolve_path(project_root, extension_dir or config.extension_dir)
    preflight = []
    if stage_from is not None:
        preflight.append(
            partial(stage_extension, Path(stage_from), ext_dir, config.required_files)
        )
    preflight.append(partial(verify_required_files, ext_dir, config.required_files))

    # 3. Run checks with live narration on stderr
    console.print(f"[bold]Testing extension:[/bold] {ext_dir}")
    runner = CheckRunner(
        checks=build_checks(config),
        session_factory=lambda: launch_session(ext_dir, config.browser),
        config=config,
        extension_dir=ext_dir,
        preflight=preflight,
        budget_seconds=budget,
        on_outcome=lambda outcome: render_outcome(outcome, console),
    )
    outcomes = await runner.run_all()
    report = build_report(outcomes)
    for message in runner.callback_errors:
        console.print(f"[yellow]Warning:[/yellow] narration failed: {escape(message)}")

    # 4. Write artifacts
    writer = ReportWriter.from_config(project_root, config.output)
    try:
        writer.write(report, datetime.now().astimezone())
    except SinkError as exc:
        console.print(f"[bold red]Report error:[/bold red] {exc}")
        raise typer.Exit(code=EXIT_SINK_ERROR)

    # 5. Output results
    if format_json:
        output_json(report)
    else:
        output_console = Console(no_color=is_ci(config))
        render_summary(report, output_console)
        output_console.print(f"[dim]JSON: {writer.results_path}[/dim]")
        output_console.print(f"[dim]HTML: {writer.report_path}[/dim]")

    # 6. Exit code
    if report.exit_code != 0:
        raise typer.Exit(code=report.exit_code)
