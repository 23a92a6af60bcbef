"""extprobe data models - re-exports all public model classes."""

from extprobe.models.config import (
    BrowserConfig,
    OutputConfig,
    ProbeConfig,
    RedirectProbe,
    TrafficConfig,
)
from extprobe.models.outcome import CheckOutcome, CheckStatus, RunReport

__all__ = [
    "BrowserConfig",
    "CheckOutcome",
    "CheckStatus",
    "OutputConfig",
    "ProbeConfig",
    "RedirectProbe",
    "RunReport",
    "TrafficConfig",
]
