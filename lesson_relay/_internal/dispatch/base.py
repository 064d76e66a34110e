"""Dispatch strategy interface."""

from typing import Any, Protocol, runtime_checkable

from lesson_relay.models import Request


@runtime_checkable
class Dispatcher(Protocol):
    """Sends a request and returns once the transport reports an outcome.

    Implementations raise DispatchError on transport failure. The HTTP status
    of a response is not an error.
    """

    async def send(self, request: Request) -> Any:
        ...
