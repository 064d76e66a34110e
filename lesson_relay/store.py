"""Session store holding captured request templates."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from lesson_relay.models import Request


@runtime_checkable
class SessionStore(Protocol):
    """Read side of the keyed store populated by the capture layer."""

    async def get(self, key: str) -> Request | None:
        ...


class InMemorySessionStore:
    """Dict-backed session store."""

    def __init__(self) -> None:
        self._data: dict[str, Request] = {}

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "InMemorySessionStore":
        """Build a store from raw captured entries (dicts or Request objects).

        Raises:
            pydantic.ValidationError: If an entry is not a valid request.
        """
        store = cls()
        for key, value in raw.items():
            store.put(key, Request.model_validate(value))
        return store

    def put(self, key: str, request: Request) -> None:
        self._data[key] = request

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    async def get(self, key: str) -> Request | None:
        return self._data.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data
