"""Tracker list check -- the newline-delimited URL list ships non-empty."""

from __future__ import annotations

from pathlib import Path

from extprobe.checks.base import BaseCheck, CheckContext
from extprobe.errors import CheckError


def read_tracker_urls(path: Path) -> list[str]:
    """Return the non-blank, stripped entries of a tracker list file."""
    text = path.read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


class TrackerListCheck(BaseCheck):
    """Static check on the staged list file; does not touch the browser."""

    name = "Tracker URLs Loading"

    async def run(self, ctx: CheckContext) -> str:
        return self.run_static(ctx.extension_dir, ctx.config.list_file)

    def run_static(self, extension_dir: Path, list_file: str) -> str:
        path = extension_dir / list_file
        if not path.is_file():
            raise CheckError(f"{list_file} is empty or not found")
        urls = read_tracker_urls(path)
        if not urls:
            raise CheckError(f"{list_file} is empty or not found")
        return f"Successfully loaded {len(urls)} tracker URLs"
