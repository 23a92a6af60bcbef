"""Structured report artifact: outcome list serialization and aggregation.

The results file is a JSON array of outcomes in execution order, each
element carrying ``name``, ``status``, ``durationMs`` and, when present,
``details`` or ``error``. Loading it back yields equal CheckOutcome values.
"""

from __future__ import annotations

import json
from collections.abc import Iterable

from pydantic import TypeAdapter

from extprobe.models.outcome import CheckOutcome, RunReport

_OUTCOME_LIST = TypeAdapter(list[CheckOutcome])


def build_report(outcomes: Iterable[CheckOutcome]) -> RunReport:
    """Freeze an ordered outcome sequence into a RunReport.

    Raises:
        pydantic.ValidationError: If outcomes is empty.
    """
    return RunReport(outcomes=tuple(outcomes))


def dump_outcomes(outcomes: Iterable[CheckOutcome]) -> str:
    """Serialize outcomes to the results-file JSON text (2-space indent)."""
    data = [outcome.to_wire() for outcome in outcomes]
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def load_outcomes(content: str | bytes) -> list[CheckOutcome]:
    """Parse results-file JSON text back into outcomes, order preserved.

    Raises:
        pydantic.ValidationError: If the content is not a valid outcome list.
    """
    return _OUTCOME_LIST.validate_json(content)
