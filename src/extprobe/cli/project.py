"""Project resolution shared by the CLI commands.

Finds the project root, loads extprobe.yaml with error reporting, and
resolves config-relative paths.
"""

from __future__ import annotations

import os
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console

from extprobe.models.config import CONFIG_FILENAME, ProbeConfig, find_project_root, load_probe_config

# typer/click use 2 for usage errors; configuration errors share it.
EXIT_CONFIG_ERROR = 2


def load_project(console: Console) -> tuple[Path, ProbeConfig]:
    """Locate the project root and load its config, exiting on errors."""
    project_root = find_project_root()
    try:
        config = load_probe_config(project_root)
    except yaml.YAMLError as exc:
        console.print(f"[bold red]{CONFIG_FILENAME} is not valid YAML:[/bold red] {exc}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    except ValidationError as exc:
        console.print(f"[bold red]{CONFIG_FILENAME} validation errors:[/bold red]")
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"])
            console.print(f"  {field}: {err['msg']}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR)
    return project_root, config


def resolve_path(project_root: Path, value: str | Path) -> Path:
    """Resolve a config or CLI path against the project root."""
    path = Path(value)
    return path if path.is_absolute() else project_root / path


def is_ci(config: ProbeConfig) -> bool:
    """CI mode from config, or auto-detected from the CI environment variable."""
    if config.ci_mode:
        return True
    return os.environ.get("CI", "").lower() in ("true", "1", "yes")
