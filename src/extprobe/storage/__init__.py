"""Report artifact persistence."""

from extprobe.storage.report_store import ReportWriter

__all__ = ["ReportWriter"]
