"""Report building: aggregation, JSON serialization, and HTML rendering."""

from extprobe.report.builder import build_report, dump_outcomes, load_outcomes
from extprobe.report.html import render_html

__all__ = [
    "build_report",
    "dump_outcomes",
    "load_outcomes",
    "render_html",
]
