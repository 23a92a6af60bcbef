"""Background script check -- passes when the extension APIs are reachable
from inside the service worker."""

from __future__ import annotations

from extprobe.checks.base import BaseCheck, CheckContext
from extprobe.errors import CheckError

# Evaluated inside the service worker; receives the API names to probe.
_PROBE_APIS_JS = """
(apis) => {
  const hasChrome = typeof chrome !== 'undefined';
  return {
    hasChrome,
    missing: apis.filter((api) => !hasChrome || typeof chrome[api] === 'undefined'),
  };
}
"""


class BackgroundScriptCheck(BaseCheck):
    """Evaluates code in the background context and checks the chrome.* APIs."""

    name = "Background Script"

    async def run(self, ctx: CheckContext) -> str:
        worker = await ctx.session.extension_worker(
            ctx.config.browser.worker_timeout_seconds
        )
        if worker is None:
            raise CheckError("Service worker not found")

        apis = list(ctx.config.background_apis)
        result = await worker.evaluate(_PROBE_APIS_JS, apis)

        if not result.get("hasChrome"):
            raise CheckError("Chrome APIs not available in background script: chrome")
        missing = result.get("missing") or []
        if missing:
            raise CheckError(
                "Chrome APIs not available in background script: "
                + ", ".join(missing)
            )

        if apis:
            return f"Background script loaded with Chrome APIs ({', '.join(apis)})"
        return "Background script loaded with Chrome APIs"
