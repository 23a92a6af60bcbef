"""Traffic observation check -- watches the requests a page makes while the
extension is active and counts the ones blocked on the client side."""

from __future__ import annotations

from dataclasses import dataclass, field

from extprobe.checks.base import BaseCheck, CheckContext, close_page
from extprobe.errors import CheckError

# Chromium's failure text for requests cancelled by an extension.
BLOCKED_BY_CLIENT = "net::ERR_BLOCKED_BY_CLIENT"


@dataclass
class TrafficLog:
    """Requests seen on one page, in the order the browser issued them."""

    requests: list[str] = field(default_factory=list)
    blocked: list[str] = field(default_factory=list)

    def on_request(self, request) -> None:
        self.requests.append(request.url)

    def on_request_failed(self, request) -> None:
        failure = request.failure or ""
        if BLOCKED_BY_CLIENT in failure:
            self.blocked.append(request.url)


class TrafficObservationCheck(BaseCheck):
    """Navigates a fresh page and reports observed and blocked request counts.

    With ``traffic.min_blocked_requests`` at 0 the check passes whenever
    the navigation completes; a positive value turns it into an
    assertion that the extension actually blocked something.
    """

    name = "Tracker Blocking"

    async def run(self, ctx: CheckContext) -> str:
        traffic = ctx.config.traffic
        log = TrafficLog()

        page = await ctx.session.new_page()
        try:
            page.on("request", log.on_request)
            page.on("requestfailed", log.on_request_failed)
            await page.goto(traffic.url, wait_until=traffic.wait_until)
            if traffic.settle_seconds > 0:
                await page.wait_for_timeout(traffic.settle_seconds * 1000)
        finally:
            await close_page(page)

        if len(log.blocked) < traffic.min_blocked_requests:
            raise CheckError(
                f"Expected at least {traffic.min_blocked_requests} blocked requests, "
                f"observed {len(log.blocked)} of {len(log.requests)}"
            )
        return (
            f"Monitored {len(log.requests)} requests, "
            f"{len(log.blocked)} blocked, extension is active"
        )
