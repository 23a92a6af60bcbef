"""Tests for extprobe.cli.output - Rich narration and summary rendering."""

from __future__ import annotations

import json
from io import StringIO

from rich.console import Console

from extprobe.cli.output import output_json, render_outcome, render_summary
from extprobe.models import CheckOutcome, RunReport


def _make_console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=120, no_color=True, highlight=False), buffer


class TestRenderOutcome:
    def test_passed_line(self):
        console, buffer = _make_console()
        render_outcome(CheckOutcome.passed("Extension Loading", "loaded", 42), console)
        line = buffer.getvalue()
        assert "✓ Extension Loading (42ms): loaded" in line

    def test_failed_line_shows_error(self):
        console, buffer = _make_console()
        render_outcome(CheckOutcome.failed("Background Script", "no webRequest", 3), console)
        assert "✗ Background Script (3ms): no webRequest" in buffer.getvalue()

    def test_zero_duration_omitted(self):
        console, buffer = _make_console()
        render_outcome(CheckOutcome.failed("Test Suite Initialization", "boom"), console)
        output = buffer.getvalue()
        assert "ms)" not in output
        assert "Test Suite Initialization: boom" in output

    def test_markup_in_values_not_interpreted(self):
        console, buffer = _make_console()
        render_outcome(CheckOutcome.failed("a", "[bold]not markup[/bold]"), console)
        assert "[bold]not markup[/bold]" in buffer.getvalue()


class TestRenderSummary:
    def test_failing_run(self):
        console, buffer = _make_console()
        report = RunReport(
            outcomes=[CheckOutcome.passed("a", duration_ms=10), CheckOutcome.failed("b", "x", 5)]
        )
        render_summary(report, console)
        output = buffer.getvalue()
        assert "FAIL" in output
        assert "1/2 passed" in output
        assert "15ms" in output

    def test_passing_run(self):
        console, buffer = _make_console()
        render_summary(RunReport(outcomes=[CheckOutcome.passed("a")]), console)
        output = buffer.getvalue()
        assert "PASS" in output
        assert "1/1 passed" in output
        assert "Failed" not in output


class TestOutputJson:
    def test_pure_json(self, capsys):
        report = RunReport(
            outcomes=[CheckOutcome.passed("a", "ok", 1), CheckOutcome.failed("b", "x", 2)]
        )
        output_json(report)
        data = json.loads(capsys.readouterr().out)
        assert data == [
            {"name": "a", "status": "passed", "details": "ok", "durationMs": 1},
            {"name": "b", "status": "failed", "error": "x", "durationMs": 2},
        ]
