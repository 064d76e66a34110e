"""Dispatch from inside the active page's own security context.

Some endpoints compare the request's Origin header with the page that sent
it. Origin cannot be forged from outside the browser, so the request is
handed to the page and issued there with ``fetch``.
"""

from typing import Any, Protocol, runtime_checkable

from lesson_relay.exceptions import DispatchError
from lesson_relay.models import Request

TabHandle = Any


@runtime_checkable
class TabLookup(Protocol):
    """Resolves the tab currently showing the product."""

    async def get_tab(self) -> TabHandle:
        ...


@runtime_checkable
class PageRunner(Protocol):
    """Issues a serialized request from within a tab and returns once sent."""

    async def run(self, tab: TabHandle, request_json: str) -> None:
        ...


class PageContextDispatcher:
    """Sends requests through the active tab."""

    def __init__(self, tab_lookup: TabLookup, runner: PageRunner) -> None:
        self._tab_lookup = tab_lookup
        self._runner = runner

    async def send(self, request: Request) -> None:
        tab = await self._tab_lookup.get_tab()
        try:
            await self._runner.run(tab, request.to_wire())
        except DispatchError:
            raise
        except Exception as e:
            raise DispatchError(
                f"{request.method} {request.url} failed in page context: {e}",
                url=request.url,
            ) from e
