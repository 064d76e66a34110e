"""Direct dispatch from this process over httpx."""

import httpx

from lesson_relay._internal.http import create_http_client
from lesson_relay.config import RelaySettings
from lesson_relay.exceptions import DispatchError
from lesson_relay.models import Request

# Computed by the transport for the outgoing body and target.
TRANSPORT_HEADERS: frozenset[str] = frozenset({"content-length", "host"})


def replay_headers(headers: dict[str, str]) -> dict[str, str]:
    """Captured headers minus those the transport must compute itself."""
    return {name: value for name, value in headers.items() if name.lower() not in TRANSPORT_HEADERS}


class DirectDispatcher:
    """Replays requests from this process.

    Suitable for endpoints that do not check the request's Origin against
    the page that issued it. Any HTTP response counts as delivered; only
    transport failures raise.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize the dispatcher.

        Args:
            client: Async client used for every request. Not closed by the
                dispatcher unless ``aclose`` is called.
        """
        self._client = client

    @classmethod
    def from_settings(cls, settings: RelaySettings) -> "DirectDispatcher":
        """Create a dispatcher owning a freshly configured client."""
        return cls(create_http_client(timeout_ms=settings.timeout_ms, user_agent=settings.user_agent))

    async def send(self, request: Request) -> httpx.Response:
        """Replay ``request`` with its method, headers and body."""
        return await self._request(request.method, request.url, request.headers, request.body)

    async def fetch(self, request: Request) -> httpx.Response:
        """Issue a read-only GET to the request's URL with its headers."""
        return await self._request("GET", request.url, request.headers, None)

    async def _request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: str | None,
    ) -> httpx.Response:
        try:
            return await self._client.request(
                method,
                url,
                headers=replay_headers(headers),
                content=body,
            )
        except httpx.TimeoutException as e:
            raise DispatchError(f"{method} {url} timed out", url=url) from e
        except httpx.HTTPError as e:
            raise DispatchError(f"{method} {url} failed: {e}", url=url) from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "DirectDispatcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
