"""Run execution: extension staging, browser session, and the check runner."""

from extprobe.execution.runner import (
    SUITE_INIT_NAME,
    SUITE_TEARDOWN_NAME,
    CheckRunner,
    run_checks,
    run_guarded,
)
from extprobe.execution.staging import stage_extension, verify_required_files

__all__ = [
    "CheckRunner",
    "SUITE_INIT_NAME",
    "SUITE_TEARDOWN_NAME",
    "run_checks",
    "run_guarded",
    "stage_extension",
    "verify_required_files",
]
