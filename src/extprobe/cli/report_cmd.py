"""extprobe report -- re-render the HTML report from stored results.

Reads a results JSON written by a previous run, renders the HTML report
again with a fresh generation timestamp, and prints the summary. The
exit code mirrors the stored run.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from extprobe.cli.output import output_json, render_outcome, render_summary
from extprobe.cli.project import EXIT_CONFIG_ERROR, load_project, resolve_path
from extprobe.cli.run_cmd import EXIT_SINK_ERROR
from extprobe.errors import SinkError
from extprobe.storage.report_store import ReportWriter


def report(
    results: Optional[str] = typer.Argument(
        None, help="Results JSON to read (default: from config)"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="HTML report path (default: from config)"
    ),
    format_json: bool = typer.Option(
        False, "--json", "--format-json", help="Output pure JSON to stdout"
    ),
) -> None:
    """Render the HTML report from an existing results file."""
    console = Console()
    err_console = Console(stderr=True)
    project_root, config = load_project(err_console)

    default_writer = ReportWriter.from_config(project_root, config.output)
    writer = ReportWriter(
        results_path=resolve_path(project_root, results) if results else default_writer.results_path,
        report_path=resolve_path(project_root, output) if output else default_writer.report_path,
        title=config.output.title,
    )

    try:
        run_report = writer.load_results()
    except FileNotFoundError:
        err_console.print(
            f"No results found at {writer.results_path}. Run 'extprobe run' first."
        )
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    except (OSError, UnicodeDecodeError) as exc:
        err_console.print(
            f"[bold red]Cannot read results file {writer.results_path}:[/bold red] {exc}"
        )
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    except ValidationError as exc:
        err_console.print(
            f"[bold red]Invalid results file {writer.results_path}:[/bold red] "
            f"{exc.error_count()} error(s)"
        )
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    try:
        writer.write_html(run_report, datetime.now().astimezone())
    except SinkError as exc:
        err_console.print(f"[bold red]Report error:[/bold red] {exc}")
        raise typer.Exit(code=EXIT_SINK_ERROR)

    if format_json:
        output_json(run_report)
    else:
        for outcome in run_report.outcomes:
            render_outcome(outcome, console)
        render_summary(run_report, console)
        console.print(f"[dim]HTML: {writer.report_path}[/dim]")

    if run_report.exit_code != 0:
        raise typer.Exit(code=run_report.exit_code)
