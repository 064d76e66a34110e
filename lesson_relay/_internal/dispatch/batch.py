"""Concurrent fan-out of request batches."""

import asyncio
from collections.abc import Sequence
from typing import Any

from lesson_relay._internal.dispatch.base import Dispatcher
from lesson_relay.models import Request


async def dispatch_all(dispatcher: Dispatcher, requests: Sequence[Request]) -> list[Any]:
    """Send every request concurrently and wait for all of them.

    All requests are started before any is awaited. The first failure
    observed is raised; requests already in flight are not cancelled and
    their outcomes are discarded.

    Args:
        dispatcher: Strategy used for every request in the batch.
        requests: Requests to send. An empty batch is a no-op.

    Returns:
        Per-request results in input order.
    """
    if not requests:
        return []
    tasks = [asyncio.ensure_future(dispatcher.send(request)) for request in requests]
    return list(await asyncio.gather(*tasks))
