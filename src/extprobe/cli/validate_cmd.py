"""extprobe validate CLI command for static extension validation.

Checks the extension directory without launching a browser: every
required file must exist and the tracker list must be non-empty.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from extprobe.checks.tracker_list import TrackerListCheck
from extprobe.cli.project import load_project, resolve_path
from extprobe.errors import CheckError
from extprobe.execution.staging import missing_files


def validate(
    extension_dir: Optional[str] = typer.Option(
        None, "--extension-dir", "-e", help="Extension directory (default: from config)"
    ),
) -> None:
    """Validate the staged extension files without launching a browser.

    Reports every missing file at once. Exits with code 0 if the
    extension is complete, 1 otherwise.
    """
    console = Console()
    project_root, config = load_project(Console(stderr=True))
    ext_dir = resolve_path(project_root, extension_dir or config.extension_dir)

    missing = set(missing_files(ext_dir, config.required_files))
    for name in config.required_files:
        status = "[red]missing[/red]" if name in missing else "ok"
        console.print(f"  {escape(name)} ... {status}")

    list_error: str | None = None
    try:
        details = TrackerListCheck().run_static(ext_dir, config.list_file)
    except CheckError as exc:
        list_error = str(exc)
        console.print(f"  [red]{escape(list_error)}[/red]")
    else:
        console.print(f"  {escape(details)}")

    present = len(config.required_files) - len(missing)
    console.print(f"\n{present}/{len(config.required_files)} required files present")

    if missing or list_error:
        raise typer.Exit(code=1)
