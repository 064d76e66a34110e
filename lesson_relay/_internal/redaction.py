"""Redaction of sensitive header values in debug traces."""

from typing import Any

from lesson_relay.models import Request

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "cookie",
    "set-cookie",
    "proxy-authorization",
    "x-csrf-token",
    "x-xsrf-token",
    "x-api-key",
    "x-session-token",
    "x-auth-token",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` with sensitive values replaced.

    Header names are matched case-insensitively and keep their original case.
    """
    return {
        name: REDACTED_VALUE if name.lower() in REDACT_HEADERS else value
        for name, value in headers.items()
    }


def redact_request(request: Request, *, body_limit: int = 256) -> dict[str, Any]:
    """Summarize a request for tracing.

    The original request is never mutated.

    Args:
        request: The request to summarize.
        body_limit: Maximum number of body characters to include.

    Returns:
        A dict with method, url, redacted headers and a truncated body.
    """
    body = request.body
    if body is not None and len(body) > body_limit:
        body = body[: body_limit - 3] + "..."
    return {
        "method": request.method,
        "url": request.url,
        "headers": redact_headers(request.headers),
        "body": body,
    }
