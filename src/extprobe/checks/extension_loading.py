"""Extension loading check -- passes when the extension service worker is up."""

from __future__ import annotations

from extprobe.checks.base import BaseCheck, CheckContext
from extprobe.errors import CheckError


class ExtensionLoadingCheck(BaseCheck):
    """Verifies that Chromium registered the extension's service worker."""

    name = "Extension Loading"

    async def run(self, ctx: CheckContext) -> str:
        worker = await ctx.session.extension_worker(
            ctx.config.browser.worker_timeout_seconds
        )
        if worker is None:
            raise CheckError("Extension service worker not found")
        return "Extension loaded successfully with service worker"
