"""Check registry -- the fixed, ordered battery run against the extension."""

from __future__ import annotations

from extprobe.checks.background_script import BackgroundScriptCheck
from extprobe.checks.base import BaseCheck, CheckContext
from extprobe.checks.extension_loading import ExtensionLoadingCheck
from extprobe.checks.redirect import RedirectCheck
from extprobe.checks.tracker_list import TrackerListCheck
from extprobe.checks.traffic import TrafficObservationCheck
from extprobe.models.config import ProbeConfig

# Declaration order is execution order and report order.
CHECK_REGISTRY: list[type[BaseCheck]] = [
    ExtensionLoadingCheck,
    BackgroundScriptCheck,
    TrafficObservationCheck,
    TrackerListCheck,
]


def build_checks(config: ProbeConfig) -> list[BaseCheck]:
    """Instantiate the battery, followed by one redirect check per probe."""
    checks: list[BaseCheck] = [cls() for cls in CHECK_REGISTRY]
    checks.extend(RedirectCheck(probe) for probe in config.redirects)
    return checks


__all__ = [
    "BaseCheck",
    "CHECK_REGISTRY",
    "CheckContext",
    "build_checks",
]
