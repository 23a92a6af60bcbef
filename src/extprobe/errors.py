"""Error types shared across the run pipeline."""

from __future__ import annotations


class SetupError(Exception):
    """A prerequisite for the whole run is missing or unreachable.

    Converted by the runner into a single synthetic failed outcome.
    """


class CheckError(Exception):
    """A check's assertion failed. Recorded as that check's failed outcome."""


class SinkError(Exception):
    """Writing a report artifact failed.

    Not converted into an outcome: the run cannot report itself.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write {path}: {reason}")


def describe_exception(exc: BaseException) -> str:
    """Return a human-readable, non-empty message for an exception."""
    message = str(exc).strip()
    return message or type(exc).__name__
