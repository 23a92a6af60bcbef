"""Extension staging and required-file verification.

Staging copies only the files the extension needs from a source tree
into an isolated extension directory, leaving tests and dev configs
behind. Verification is the first preflight step of every run.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from extprobe.errors import SetupError


def missing_files(extension_dir: Path, required_files: list[str]) -> list[str]:
    """Return the required files absent from extension_dir, in declared order."""
    return [name for name in required_files if not (extension_dir / name).is_file()]


def verify_required_files(extension_dir: Path, required_files: list[str]) -> None:
    """Raise SetupError naming the first missing required file."""
    missing = missing_files(extension_dir, required_files)
    if missing:
        raise SetupError(f"Extension file missing: {missing[0]}")


def stage_extension(
    source_dir: Path, extension_dir: Path, required_files: list[str]
) -> list[Path]:
    """Copy required extension files from source_dir into extension_dir.

    Args:
        source_dir: Project source tree containing the extension files.
        extension_dir: Destination directory, created if needed.
        required_files: File names (relative to source_dir) to copy.

    Returns:
        List of staged file paths, in declared order.

    Raises:
        SetupError: If any required file is missing from source_dir.
            Nothing is copied in that case.
    """
    missing = missing_files(source_dir, required_files)
    if missing:
        raise SetupError(f"Extension file missing: {missing[0]}")

    extension_dir.mkdir(parents=True, exist_ok=True)
    staged: list[Path] = []
    for name in required_files:
        target = extension_dir / name
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source_dir / name, target)
        staged.append(target)
    return staged
