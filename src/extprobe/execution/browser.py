"""Chromium session with the extension under test loaded.

Wraps a Playwright persistent context: launches Chromium with the
extension flags, waits for the extension to initialize, and exposes the
handful of operations the checks need. The context is shared across all
checks and closed only when the session exits.
"""

from __future__ import annotations

import asyncio
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from playwright.async_api import BrowserContext, Page, Worker, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from extprobe.models.config import BrowserConfig

EXTENSION_URL_SCHEME = "chrome-extension://"


def extension_launch_args(extension_dir: Path, config: BrowserConfig) -> list[str]:
    """Return the full Chromium argument list for loading one extension."""
    extension_path = str(extension_dir.resolve())
    return [
        *config.args,
        f"--disable-extensions-except={extension_path}",
        f"--load-extension={extension_path}",
    ]


class BrowserSession:
    """Read-mostly handle on a browser context shared by all checks.

    Checks may open and close their own pages but must never close the
    context itself.
    """

    def __init__(self, context: BrowserContext, extension_dir: Path) -> None:
        self._context = context
        self.extension_dir = extension_dir

    @property
    def pages(self) -> list[Page]:
        return list(self._context.pages)

    async def extension_worker(self, timeout_seconds: float) -> Worker | None:
        """Return the extension's service worker, waiting up to timeout_seconds.

        Returns None when no extension service worker shows up in time.
        """
        for worker in self._context.service_workers:
            if worker.url.startswith(EXTENSION_URL_SCHEME):
                return worker
        try:
            worker = await self._context.wait_for_event(
                "serviceworker",
                predicate=lambda w: w.url.startswith(EXTENSION_URL_SCHEME),
                timeout=timeout_seconds * 1000,
            )
        except PlaywrightTimeoutError:
            return None
        return worker

    async def new_page(self) -> Page:
        return await self._context.new_page()

    async def wait_for_page_url(
        self, url: str, timeout_seconds: float, poll_seconds: float = 0.25
    ) -> Page | None:
        """Poll open pages until one is at ``url``. Returns None on timeout."""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout_seconds
        while True:
            for page in self._context.pages:
                if page.url == url:
                    return page
            if loop.time() >= deadline:
                return None
            await asyncio.sleep(poll_seconds)


@asynccontextmanager
async def launch_session(
    extension_dir: Path, config: BrowserConfig
) -> AsyncIterator[BrowserSession]:
    """Launch Chromium with the extension loaded and yield a BrowserSession.

    Uses a throwaway profile directory. Sleeps ``config.settle_seconds``
    after launch so the extension's service worker can register.
    """
    with tempfile.TemporaryDirectory(prefix="extprobe_profile_") as profile_dir:
        async with async_playwright() as playwright:
            context = await playwright.chromium.launch_persistent_context(
                profile_dir,
                channel=config.channel,
                headless=config.headless,
                args=extension_launch_args(extension_dir, config),
            )
            try:
                if config.settle_seconds > 0:
                    await asyncio.sleep(config.settle_seconds)
                yield BrowserSession(context, extension_dir)
            finally:
                await context.close()
