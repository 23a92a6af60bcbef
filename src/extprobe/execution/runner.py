"""CheckRunner: sequential, fail-soft execution of the check battery.

Runs preflight steps, opens one browser session, and executes each
check once in declaration order. Every failure is turned into data: a
failing check becomes a failed CheckOutcome, and a failing setup
becomes a single synthetic outcome. An overall wall-clock budget bounds
the whole run.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager, AsyncExitStack
from pathlib import Path
from typing import TYPE_CHECKING

from extprobe.checks.base import CLOSE_GRACE_SECONDS, BaseCheck, CheckContext
from extprobe.errors import SetupError, describe_exception
from extprobe.models.config import ProbeConfig
from extprobe.models.outcome import CheckOutcome

if TYPE_CHECKING:
    from extprobe.execution.browser import BrowserSession

SUITE_INIT_NAME = "Test Suite Initialization"
SUITE_TEARDOWN_NAME = "Test Suite Teardown"

SessionFactory = Callable[[], AbstractAsyncContextManager["BrowserSession"]]
PreflightStep = Callable[[], None]


def _elapsed_ms(start: float) -> int:
    return max(0, int((time.perf_counter() - start) * 1000))


async def run_guarded(check: BaseCheck, ctx: CheckContext) -> CheckOutcome:
    """Run one check inside a failure boundary and time it.

    Any exception raised by the check is converted into a failed
    outcome carrying the exception's message. Cancellation is not
    an Exception and propagates.
    """
    start = time.perf_counter()
    try:
        details = await check.run(ctx)
    except Exception as exc:
        return CheckOutcome.failed(check.name, describe_exception(exc), _elapsed_ms(start))
    return CheckOutcome.passed(check.name, details, _elapsed_ms(start))


class CheckRunner:
    """Executes an ordered list of checks against one shared browser session.

    The returned outcome list is never empty and preserves declaration
    order. Checks never abort their siblings.
    """

    def __init__(
        self,
        checks: Sequence[BaseCheck],
        session_factory: SessionFactory,
        config: ProbeConfig,
        extension_dir: Path,
        preflight: Sequence[PreflightStep] = (),
        budget_seconds: float | None = None,
        on_outcome: Callable[[CheckOutcome], None] | None = None,
    ) -> None:
        self._checks = list(checks)
        self._session_factory = session_factory
        self._config = config
        self._extension_dir = extension_dir
        self._preflight = list(preflight)
        self._budget_seconds = (
            budget_seconds if budget_seconds is not None else config.run_budget_seconds
        )
        self._on_outcome = on_outcome
        self._on_outcome_errors: list[str] = []

    @property
    def callback_errors(self) -> list[str]:
        """Messages of exceptions raised by the on_outcome callback, in order."""
        return list(self._on_outcome_errors)

    async def run_all(self) -> list[CheckOutcome]:
        """Execute preflight, then every check, and return their outcomes.

        Returns:
            One outcome per attempted check, or a single synthetic
            initialization failure if setup did not complete. A teardown
            failure after the checks ran is appended as a final outcome.
        """
        outcomes: list[CheckOutcome] = []
        deadline = asyncio.get_running_loop().time() + self._budget_seconds

        if not self._checks:
            self._record(outcomes, CheckOutcome.failed(SUITE_INIT_NAME, "No checks configured"))
            return outcomes

        stack = AsyncExitStack()
        try:
            session = await self._setup(stack, deadline)
        except Exception as exc:
            self._record(outcomes, CheckOutcome.failed(SUITE_INIT_NAME, describe_exception(exc)))
            return outcomes

        ctx = CheckContext(
            session=session,
            extension_dir=self._extension_dir,
            config=self._config,
        )
        try:
            for check in self._checks:
                self._record(outcomes, await self._run_one(check, ctx, deadline))
        finally:
            teardown_error = await self._teardown(stack, deadline)

        if teardown_error is not None:
            self._record(outcomes, CheckOutcome.failed(SUITE_TEARDOWN_NAME, teardown_error))
        return outcomes

    async def _setup(self, stack: AsyncExitStack, deadline: float) -> BrowserSession:
        """Run preflight steps and open the session within the run budget."""
        timeout = asyncio.timeout_at(deadline)
        try:
            async with timeout:
                for step in self._preflight:
                    step()
                return await stack.enter_async_context(self._session_factory())
        except TimeoutError:
            if not timeout.expired():
                raise
            raise SetupError(
                f"Run budget of {self._budget_seconds:g}s exhausted during suite setup"
            ) from None

    async def _teardown(self, stack: AsyncExitStack, deadline: float) -> str | None:
        """Close the session, bounded by the run budget plus a short grace.

        Returns:
            The failure message, or None when the session closed cleanly.
        """
        timeout = asyncio.timeout_at(deadline + CLOSE_GRACE_SECONDS)
        try:
            async with timeout:
                await stack.aclose()
        except TimeoutError as exc:
            if not timeout.expired():
                return describe_exception(exc)
            return f"Run budget of {self._budget_seconds:g}s exhausted during session close"
        except Exception as exc:
            return describe_exception(exc)
        return None

    async def _run_one(
        self, check: BaseCheck, ctx: CheckContext, deadline: float
    ) -> CheckOutcome:
        if asyncio.get_running_loop().time() >= deadline:
            return CheckOutcome.failed(
                check.name,
                f"Run budget of {self._budget_seconds:g}s exhausted before check started",
            )

        start = time.perf_counter()
        timeout = asyncio.timeout_at(deadline)
        try:
            async with timeout:
                return await run_guarded(check, ctx)
        except TimeoutError:
            if not timeout.expired():
                raise
            return CheckOutcome.failed(
                check.name,
                f"Run budget of {self._budget_seconds:g}s exhausted during check",
                _elapsed_ms(start),
            )

    def _record(self, outcomes: list[CheckOutcome], outcome: CheckOutcome) -> None:
        outcomes.append(outcome)
        if self._on_outcome is None:
            return
        try:
            self._on_outcome(outcome)
        except Exception as exc:
            # The outcome is already recorded; narration must not stop the run.
            self._on_outcome_errors.append(describe_exception(exc))


def run_checks(runner: CheckRunner) -> list[CheckOutcome]:
    """Blocking entry point for synchronous callers."""
    return asyncio.run(runner.run_all())
