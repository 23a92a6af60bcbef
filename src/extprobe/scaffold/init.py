"""Project scaffolding for `extprobe init`.

Writes an extprobe.yaml holding every default, so the available knobs
are visible and editable in one place.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from extprobe.models.config import CONFIG_FILENAME, ProbeConfig

_HEADER = "# extprobe configuration. Paths are relative to this file.\n"


class ConfigExistsError(Exception):
    """Raised when scaffold_config would overwrite an existing config."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File already exists: {path}")


def render_default_config() -> str:
    """Return the YAML text of a config with all defaults spelled out."""
    data = ProbeConfig().model_dump(mode="json")
    return _HEADER + yaml.safe_dump(data, sort_keys=False, default_flow_style=False)


def scaffold_config(directory: Path, force: bool = False) -> Path:
    """Write a default extprobe.yaml into directory.

    Args:
        directory: Target project directory, created if needed.
        force: If True, overwrite an existing config.

    Returns:
        Path of the written config file.

    Raises:
        ConfigExistsError: If the config exists and force is False.
    """
    directory = directory.resolve()
    target = directory / CONFIG_FILENAME
    if target.exists() and not force:
        raise ConfigExistsError(target)

    directory.mkdir(parents=True, exist_ok=True)
    target.write_text(render_default_config(), encoding="utf-8")
    return target
