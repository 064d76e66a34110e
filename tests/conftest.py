"""Shared fixtures."""

import itertools

import pytest

from lesson_relay.exceptions import DispatchError
from lesson_relay.models import Request
from lesson_relay.store import InMemorySessionStore


class RecordingDispatcher:
    """Dispatcher double that records requests and can fail on chosen URLs."""

    def __init__(self, fail_urls: set[str] | None = None) -> None:
        self.sent: list[Request] = []
        self.fail_urls = fail_urls or set()

    async def send(self, request: Request) -> None:
        self.sent.append(request)
        if request.url in self.fail_urls:
            raise DispatchError(f"boom: {request.url}", url=request.url)


@pytest.fixture
def store():
    return InMemorySessionStore()


@pytest.fixture
def recorder():
    return RecordingDispatcher()


@pytest.fixture
def make_recorder():
    return RecordingDispatcher


@pytest.fixture
def id_generator():
    """Deterministic, never-repeating ids."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"
