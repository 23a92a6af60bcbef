"""extprobe - CI checks and reports for browser extensions under test."""

__version__ = "0.1.0"
