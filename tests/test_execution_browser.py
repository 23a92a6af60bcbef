"""Tests for BrowserSession against a stand-in Playwright context."""

from __future__ import annotations

from pathlib import Path

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from extprobe.execution.browser import BrowserSession, extension_launch_args
from extprobe.models.config import DEFAULT_BROWSER_ARGS, BrowserConfig


class FakeWorker:
    def __init__(self, url: str) -> None:
        self.url = url


class FakePage:
    def __init__(self, url: str) -> None:
        self.url = url


class FakeContext:
    def __init__(self, workers=None, pages=None, late_worker=None) -> None:
        self.service_workers = list(workers or [])
        self.pages = list(pages or [])
        self._late_worker = late_worker
        self.new_pages = 0
        self.wait_timeouts: list[float] = []

    async def wait_for_event(self, event: str, predicate=None, timeout: float = 0):
        assert event == "serviceworker"
        self.wait_timeouts.append(timeout)
        if self._late_worker is not None and predicate(self._late_worker):
            return self._late_worker
        raise PlaywrightTimeoutError("Timeout exceeded")

    async def new_page(self) -> FakePage:
        self.new_pages += 1
        page = FakePage("about:blank")
        self.pages.append(page)
        return page


class TestExtensionLaunchArgs:
    def test_appends_extension_flags(self, tmp_path: Path):
        args = extension_launch_args(tmp_path, BrowserConfig())
        assert args[: len(DEFAULT_BROWSER_ARGS)] == DEFAULT_BROWSER_ARGS
        assert f"--disable-extensions-except={tmp_path.resolve()}" in args
        assert f"--load-extension={tmp_path.resolve()}" in args

    def test_custom_args(self, tmp_path: Path):
        args = extension_launch_args(tmp_path, BrowserConfig(args=["--mute-audio"]))
        assert args[0] == "--mute-audio"
        assert len(args) == 3


class TestExtensionWorker:
    @pytest.mark.asyncio
    async def test_existing_extension_worker(self):
        worker = FakeWorker("chrome-extension://abcdef/background.js")
        context = FakeContext(workers=[FakeWorker("https://site.example/sw.js"), worker])
        session = BrowserSession(context, Path("ext"))
        assert await session.extension_worker(1.0) is worker
        assert context.wait_timeouts == []

    @pytest.mark.asyncio
    async def test_waits_for_late_worker(self):
        late = FakeWorker("chrome-extension://abcdef/background.js")
        context = FakeContext(late_worker=late)
        session = BrowserSession(context, Path("ext"))
        assert await session.extension_worker(2.0) is late
        assert context.wait_timeouts == [2000.0]

    @pytest.mark.asyncio
    async def test_none_on_timeout(self):
        context = FakeContext(workers=[FakeWorker("https://site.example/sw.js")])
        session = BrowserSession(context, Path("ext"))
        assert await session.extension_worker(0.5) is None


class TestPages:
    @pytest.mark.asyncio
    async def test_new_page(self):
        context = FakeContext()
        session = BrowserSession(context, Path("ext"))
        page = await session.new_page()
        assert session.pages == [page]

    @pytest.mark.asyncio
    async def test_wait_for_page_url_found(self):
        target = FakePage("https://www.example.org/article/")
        context = FakeContext(pages=[FakePage("about:blank"), target])
        session = BrowserSession(context, Path("ext"))
        assert await session.wait_for_page_url("https://www.example.org/article/", 1.0) is target

    @pytest.mark.asyncio
    async def test_wait_for_page_url_timeout(self):
        context = FakeContext(pages=[FakePage("about:blank")])
        session = BrowserSession(context, Path("ext"))
        result = await session.wait_for_page_url("https://nowhere.example/", 0.1, poll_seconds=0.02)
        assert result is None
