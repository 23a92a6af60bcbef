"""Tracker redirect check -- following a tracker link ends on the clean URL."""

from __future__ import annotations

from extprobe.checks.base import BaseCheck, CheckContext, close_page
from extprobe.errors import CheckError
from extprobe.models.config import RedirectProbe


class RedirectCheck(BaseCheck):
    """Navigates to a tracker URL and waits for a tab at the expected URL.

    One instance per configured probe. The navigation page is closed
    afterwards; the tab the extension opened is left alone.
    """

    def __init__(self, probe: RedirectProbe) -> None:
        self.probe = probe
        self.name = f"Tracker Redirect: {probe.url}"

    async def run(self, ctx: CheckContext) -> str:
        page = await ctx.session.new_page()
        try:
            await page.goto(self.probe.url, wait_until="domcontentloaded")
            target = await ctx.session.wait_for_page_url(
                self.probe.expected_url, self.probe.timeout_seconds
            )
        finally:
            await close_page(page)

        if target is None:
            raise CheckError(f"Expected tab not found: {self.probe.expected_url}")
        return f"Extension redirected to {self.probe.expected_url}"
