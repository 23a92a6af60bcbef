"""Project configuration model for extprobe.

Captures extprobe.yaml fields with defaults matching the tracker blocker
pipeline: which extension files are required, how Chromium is launched,
what the traffic check navigates to, and where reports are written.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

CONFIG_FILENAME = "extprobe.yaml"

DEFAULT_REQUIRED_FILES: list[str] = [
    "manifest.json",
    "background.js",
    "tracker-block-extension.js",
    "tracking-blocker.js",
    "tracker-urls.txt",
]

DEFAULT_BROWSER_ARGS: list[str] = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-web-security",
    "--disable-features=VizDisplayCompositor",
    "--no-first-run",
    "--disable-default-apps",
]


class BrowserConfig(BaseModel):
    """How Chromium is launched for the run.

    The extension flags are added by the session itself; ``args`` holds
    everything else.
    """

    model_config = {"extra": "forbid"}

    headless: bool = True
    channel: str | None = "chromium"
    args: list[str] = Field(default_factory=lambda: list(DEFAULT_BROWSER_ARGS))
    settle_seconds: float = Field(default=3.0, ge=0.0)
    worker_timeout_seconds: float = Field(default=10.0, gt=0.0)


class TrafficConfig(BaseModel):
    """Settings for the passive traffic observation check."""

    model_config = {"extra": "forbid"}

    url: str = "https://example.com"
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = "networkidle"
    settle_seconds: float = Field(default=2.0, ge=0.0)
    min_blocked_requests: int = Field(default=0, ge=0)


class RedirectProbe(BaseModel):
    """A tracker URL that the extension should resolve to a final URL."""

    model_config = {"extra": "forbid"}

    url: str
    expected_url: str
    timeout_seconds: float = Field(default=5.0, gt=0.0)


class OutputConfig(BaseModel):
    """Report artifact locations, relative to the project root."""

    model_config = {"extra": "forbid"}

    results_file: str = "test-results/results.json"
    report_file: str = "test-report.html"
    title: str = "Tracker Blocker Extension Test Report"


class ProbeConfig(BaseModel):
    """Project-level configuration loaded from extprobe.yaml."""

    model_config = {"extra": "forbid"}

    extension_dir: str = "extension"
    required_files: list[str] = Field(
        default_factory=lambda: list(DEFAULT_REQUIRED_FILES), min_length=1
    )
    list_file: str = "tracker-urls.txt"
    background_apis: list[str] = Field(default_factory=lambda: ["webRequest"])
    run_budget_seconds: float = Field(default=300.0, gt=0.0)
    ci_mode: bool = False
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    traffic: TrafficConfig = Field(default_factory=TrafficConfig)
    redirects: list[RedirectProbe] = Field(default_factory=list)
    output: OutputConfig = Field(default_factory=OutputConfig)


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from start (default: cwd) looking for extprobe.yaml.

    Returns cwd if no config file is found.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    while current != current.parent:
        if (current / CONFIG_FILENAME).exists():
            return current
        current = current.parent
    return Path.cwd()


def load_probe_config(project_root: Path | None = None) -> ProbeConfig:
    """Load ProbeConfig from extprobe.yaml. Returns defaults if not found.

    Args:
        project_root: Path to the project root directory. If None,
            uses find_project_root() to locate it.

    Returns:
        Validated ProbeConfig instance.
    """
    if project_root is None:
        project_root = find_project_root()
    config_path = project_root / CONFIG_FILENAME
    if not config_path.exists():
        return ProbeConfig()
    import yaml

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return ProbeConfig()
    return ProbeConfig.model_validate(raw)
