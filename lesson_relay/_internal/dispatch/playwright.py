"""Playwright-backed page context.

Install with the ``browser`` extra. This module only calls methods on the
objects it is given, so it can be imported without Playwright installed.
"""

from typing import TYPE_CHECKING

from lesson_relay.exceptions import RelayError

if TYPE_CHECKING:
    from playwright.async_api import BrowserContext, Page

FETCH_SCRIPT = """async (reqStr) => {
    const req = JSON.parse(reqStr);
    await fetch(req.url, {
        method: req.method,
        headers: req.headers,
        body: req.body,
    });
}"""


class PlaywrightTabLookup:
    """Uses the most recently opened live page of a browser context."""

    def __init__(self, context: "BrowserContext") -> None:
        self._context = context

    async def get_tab(self) -> "Page":
        pages = [page for page in self._context.pages if not page.is_closed()]
        if not pages:
            raise RelayError("No open page in the browser context")
        return pages[-1]


class PlaywrightPageRunner:
    """Runs ``fetch`` inside a Playwright page."""

    async def run(self, tab: "Page", request_json: str) -> None:
        await tab.evaluate(FETCH_SCRIPT, request_json)
