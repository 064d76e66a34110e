"""Shared HTTP client configuration."""

import httpx

from lesson_relay.config import DEFAULT_TIMEOUT_MS, DEFAULT_USER_AGENT


def create_http_client(
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    user_agent: str = DEFAULT_USER_AGENT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout_ms: Request timeout in milliseconds.
        user_agent: User-Agent sent when a replayed template has none.
        transport: Optional transport override.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout_ms / 1000,
        headers={"User-Agent": user_agent},
        transport=transport,
    )
