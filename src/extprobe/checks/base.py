"""Base check abstract class and the context shared by all checks."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from extprobe.models.config import ProbeConfig

if TYPE_CHECKING:
    from extprobe.execution.browser import BrowserSession

# Upper bound on closing a page, and on closing the session past the run budget.
CLOSE_GRACE_SECONDS = 0.5


@dataclass(frozen=True)
class CheckContext:
    """Everything a check may read: the live session, the staged
    extension directory, and the project config."""

    session: BrowserSession
    extension_dir: Path
    config: ProbeConfig


class BaseCheck(ABC):
    """Abstract base class for checks.

    A check either returns a details string describing what passed, or
    raises. The runner owns timing and turns exceptions into failed
    outcomes, so checks do not catch their own failures.
    """

    name: str = ""

    @abstractmethod
    async def run(self, ctx: CheckContext) -> str | None:
        """Run the check against the live target.

        Args:
            ctx: Shared session, extension directory, and config.

        Returns:
            Success details, or None when there is nothing to add.

        Raises:
            Exception: Any failure; the message becomes the outcome's error.
        """


async def close_page(page: Any, timeout_seconds: float = CLOSE_GRACE_SECONDS) -> None:
    """Close a check's page, giving up after timeout_seconds.

    Runs in ``finally`` blocks, including while the run budget is
    cancelling the check. A page that will not close is left to the
    session teardown, which closes the whole context.
    """
    with suppress(TimeoutError):
        async with asyncio.timeout(timeout_seconds):
            await page.close()
