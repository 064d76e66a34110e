"""Service contract shared by every product variant."""

import sys
import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from datetime import timedelta
from time import time_ns
from typing import Any

from lesson_relay._internal.payloads.fluency import IdGenerator
from lesson_relay._internal.redaction import redact_request
from lesson_relay.config import RelaySettings, StoreKeys
from lesson_relay.exceptions import RelayValidationError, TemplateMissingError
from lesson_relay.models import Feature, Product, Request
from lesson_relay.store import SessionStore

Clock = Callable[[], int]


def uuid1_generator() -> str:
    """Time-ordered unique identifier."""
    return str(uuid.uuid1())


def epoch_ms() -> int:
    """Current time in epoch milliseconds."""
    return time_ns() // 1_000_000


def to_milliseconds(time_spent: timedelta) -> int:
    """Convert a duration to whole milliseconds, rejecting negatives."""
    if time_spent < timedelta(0):
        raise RelayValidationError("time must not be negative")
    return time_spent // timedelta(milliseconds=1)


class Service(ABC):
    """Operations available for one product.

    Each variant reads captured templates from the session store, edits
    them for its wire format and sends them with the dispatch strategy it
    was constructed with. Dispatchers the service owns are closed by
    ``aclose`` or on leaving ``async with``.
    """

    product: Product

    def __init__(
        self,
        store: SessionStore,
        settings: RelaySettings | None = None,
        *,
        owned: Sequence[Any] = (),
    ) -> None:
        self._store = store
        self._settings = settings or RelaySettings()
        self._debug = self._settings.debug
        self._owned = list(owned)

    @property
    def keys(self) -> StoreKeys:
        return self._settings.store_keys

    def key_for(self, feature: Feature) -> str:
        """Store key of the template ``feature`` needs for this product."""
        return self.keys.key_for(self.product, feature)

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[lesson-relay] {message}", file=sys.stderr)

    def _trace(self, message: str, request: Request) -> None:
        if self._debug:
            self._log_debug(f"{message}: {redact_request(request)}")

    async def _get_request(self, key: str) -> Request | None:
        return await self._store.get(key)

    async def _require_request(self, key: str, message: str, *, need_body: bool = True) -> Request:
        """Fetch a template, raising if it is absent or has no body."""
        request = await self._get_request(key)
        if request is None or (need_body and request.body is None):
            self._log_debug(f"No usable template under {key!r}")
            raise TemplateMissingError(message, key=key)
        return request

    async def aclose(self) -> None:
        """Close the dispatchers this service owns."""
        owned, self._owned = self._owned, []
        for resource in owned:
            await resource.aclose()

    async def __aenter__(self) -> "Service":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def is_feature_ready(self, feature: Feature) -> bool:
        """Whether the template ``feature`` needs has been captured."""
        if feature not in (Feature.ADD_TIME, Feature.VALIDATE_LESSON):
            return False
        return await self._template_ready(Feature(feature))

    async def _template_ready(self, feature: Feature) -> bool:
        return await self._get_request(self.key_for(feature)) is not None

    @abstractmethod
    async def add_time(self, time: timedelta) -> None:
        """Report ``time`` of additional study time."""

    @abstractmethod
    async def validate_lesson(self) -> None:
        """Mark the current lesson as completed."""
