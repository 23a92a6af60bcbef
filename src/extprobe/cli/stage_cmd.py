"""extprobe stage -- copy the extension's required files into place."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from extprobe.cli.project import load_project, resolve_path
from extprobe.errors import SetupError
from extprobe.execution.staging import stage_extension


def stage(
    source: str = typer.Argument(..., help="Source tree containing the extension files"),
    destination: Optional[str] = typer.Argument(
        None, help="Extension directory to stage into (default: from config)"
    ),
) -> None:
    """Stage the required extension files from a source tree."""
    console = Console(stderr=True)
    project_root, config = load_project(console)
    dest = resolve_path(project_root, destination or config.extension_dir)

    try:
        staged = stage_extension(Path(source), dest, config.required_files)
    except SetupError as exc:
        console.print(f"[bold red]Staging error:[/bold red] {exc}")
        raise typer.Exit(code=1)

    typer.echo(f"Staged {len(staged)} files into {dest}")
