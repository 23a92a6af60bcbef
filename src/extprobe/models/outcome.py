"""Outcome data models for extprobe runs.

These models encode the report contract: one CheckOutcome per executed
check, and a RunReport aggregating them in execution order.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CheckStatus(str, Enum):
    """Terminal status of a single check."""

    passed = "passed"
    failed = "failed"


class CheckOutcome(BaseModel):
    """Result of one named check.

    ``error`` is set if and only if the check failed, and ``details``
    only accompanies a passing check. Serialized with the camelCase
    ``durationMs`` key and without absent optional fields.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str
    status: CheckStatus
    details: str | None = None
    error: str | None = None
    duration_ms: int = Field(default=0, ge=0, alias="durationMs")

    @model_validator(mode="after")
    def _check_status_fields(self) -> CheckOutcome:
        if self.status == CheckStatus.failed:
            if not self.error:
                raise ValueError("a failed outcome requires an error message")
            if self.details is not None:
                raise ValueError("a failed outcome cannot carry details")
        elif self.error is not None:
            raise ValueError("a passed outcome cannot carry an error")
        return self

    @classmethod
    def passed(
        cls, name: str, details: str | None = None, duration_ms: int = 0
    ) -> CheckOutcome:
        return cls(
            name=name,
            status=CheckStatus.passed,
            details=details,
            duration_ms=duration_ms,
        )

    @classmethod
    def failed(cls, name: str, error: str, duration_ms: int = 0) -> CheckOutcome:
        return cls(
            name=name,
            status=CheckStatus.failed,
            error=error,
            duration_ms=duration_ms,
        )

    @property
    def is_failed(self) -> bool:
        return self.status == CheckStatus.failed

    def to_wire(self) -> dict:
        """Return the JSON-ready dict written to the results artifact."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class RunReport(BaseModel):
    """Aggregate over the ordered outcomes of one run.

    Counts and total duration are derived on access, never stored.
    Immutable after construction.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    outcomes: tuple[CheckOutcome, ...] = Field(min_length=1)

    @property
    def total_count(self) -> int:
        return len(self.outcomes)

    @property
    def passed_count(self) -> int:
        return self.total_count - self.failed_count

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.is_failed)

    @property
    def total_duration_ms(self) -> int:
        return sum(o.duration_ms for o in self.outcomes)

    @property
    def has_failures(self) -> bool:
        return self.failed_count > 0

    @property
    def exit_code(self) -> int:
        """Process exit code for the run: 0 when nothing failed, 1 otherwise."""
        return 1 if self.has_failures else 0
