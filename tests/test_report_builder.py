"""Tests for extprobe.report.builder - results JSON and report aggregation."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from extprobe.models import CheckOutcome, RunReport
from extprobe.report.builder import build_report, dump_outcomes, load_outcomes


def _make_outcomes() -> list[CheckOutcome]:
    return [
        CheckOutcome.passed("Extension Loading", "Extension loaded", 120),
        CheckOutcome.failed("Background Script", "Chrome APIs not available", 15),
        CheckOutcome.passed("Tracker Blocking"),
        CheckOutcome.passed("Tracker URLs Loading", "Successfully loaded 3 tracker URLs", 1),
    ]


class TestDumpOutcomes:
    def test_array_in_order(self):
        data = json.loads(dump_outcomes(_make_outcomes()))
        assert isinstance(data, list)
        assert [d["name"] for d in data] == [
            "Extension Loading",
            "Background Script",
            "Tracker Blocking",
            "Tracker URLs Loading",
        ]

    def test_fields(self):
        data = json.loads(dump_outcomes(_make_outcomes()))
        assert data[1] == {
            "name": "Background Script",
            "status": "failed",
            "error": "Chrome APIs not available",
            "durationMs": 15,
        }
        assert data[2] == {"name": "Tracker Blocking", "status": "passed", "durationMs": 0}

    def test_indented(self):
        text = dump_outcomes(_make_outcomes())
        assert text.startswith("[\n  {")
        assert text.endswith("\n")

    def test_non_ascii_kept(self):
        text = dump_outcomes([CheckOutcome.failed("a", "échec ✗")])
        assert "échec ✗" in text


class TestLoadOutcomes:
    def test_round_trip(self):
        outcomes = _make_outcomes()
        assert load_outcomes(dump_outcomes(outcomes)) == outcomes

    def test_round_trip_single_synthetic(self):
        outcomes = [CheckOutcome.failed("Test Suite Initialization", "Extension file missing: x")]
        assert load_outcomes(dump_outcomes(outcomes)) == outcomes

    def test_accepts_bytes(self):
        outcomes = _make_outcomes()
        assert load_outcomes(dump_outcomes(outcomes).encode("utf-8")) == outcomes

    def test_rejects_invalid_status(self):
        with pytest.raises(ValidationError):
            load_outcomes('[{"name": "a", "status": "pending", "durationMs": 0}]')

    def test_rejects_failed_without_error(self):
        with pytest.raises(ValidationError):
            load_outcomes('[{"name": "a", "status": "failed", "durationMs": 0}]')

    def test_rejects_non_array(self):
        with pytest.raises(ValidationError):
            load_outcomes('{"name": "a"}')


class TestBuildReport:
    def test_builds_frozen_report(self):
        report = build_report(_make_outcomes())
        assert isinstance(report, RunReport)
        assert report.passed_count == 3
        assert report.failed_count == 1
        assert report.total_duration_ms == 136

    def test_accepts_generator(self):
        report = build_report(o for o in _make_outcomes())
        assert report.total_count == 4

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            build_report([])
