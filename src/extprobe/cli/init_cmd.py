"""extprobe init CLI command for project scaffolding.

Writes a default extprobe.yaml. Non-interactive.
"""

from __future__ import annotations

from pathlib import Path

import typer

from extprobe.scaffold.init import ConfigExistsError, scaffold_config


def init(
    directory: str = typer.Argument(".", help="Directory to initialize"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing extprobe.yaml"
    ),
) -> None:
    """Initialize an extprobe project with a default extprobe.yaml."""
    target = Path(directory)

    try:
        path = scaffold_config(target, force=force)
    except ConfigExistsError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo("Use --force to overwrite it.", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Created {path}")
