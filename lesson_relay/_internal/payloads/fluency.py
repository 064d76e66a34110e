"""Fluency Builder time payload editing.

The body is a GraphQL request of the form::

    {"variables": {"messages": [{"skip": false, "durationMs": 0,
                                 "activityAttemptId": "...",
                                 "activityStepAttemptId": "..."}]}}

Only the message fields named above are touched; everything else in the
document round-trips unchanged.
"""

import json
import math
from collections.abc import Callable
from typing import Any

from lesson_relay.exceptions import MalformedPayloadError

IdGenerator = Callable[[], str]


def parse_time_body(body: str) -> dict[str, Any]:
    """Parse a captured time body and check it carries a message list."""
    try:
        document = json.loads(body)
    except json.JSONDecodeError as e:
        raise MalformedPayloadError(f"Time body is not valid JSON: {e}") from e
    get_messages(document)
    return document


def get_messages(document: Any) -> list[dict[str, Any]]:
    """Return the ``variables.messages`` list of a parsed time body."""
    try:
        messages = document["variables"]["messages"]
    except (KeyError, TypeError) as e:
        raise MalformedPayloadError("Time body has no variables.messages") from e
    if not isinstance(messages, list) or not all(isinstance(m, dict) for m in messages):
        raise MalformedPayloadError("variables.messages must be a list of objects")
    return messages


def messages_ready(document: dict[str, Any]) -> bool:
    """True when there is at least one message and none is skipped."""
    messages = get_messages(document)
    return bool(messages) and all(not m.get("skip", False) for m in messages)


def split_evenly(total_ms: int, count: int) -> int:
    """Per-message duration, rounding halves up like the web client does."""
    return math.floor(total_ms / count + 0.5)


def apply_time(document: dict[str, Any], total_ms: int, new_id: IdGenerator) -> None:
    """Spread ``total_ms`` evenly over every message and refresh its ids.

    Edits ``document`` in place. Ids must be fresh on every call since the
    backend rejects reused attempt ids.
    """
    messages = get_messages(document)
    if not messages:
        return
    duration = split_evenly(total_ms, len(messages))
    for msg in messages:
        msg["durationMs"] = duration
        msg["activityAttemptId"] = new_id()
        msg["activityStepAttemptId"] = new_id()


def dump_body(document: dict[str, Any]) -> str:
    """Serialize a time body compactly."""
    return json.dumps(document, separators=(",", ":"), ensure_ascii=False)
