"""Pydantic models shared by the capture layer and the services.

A captured request is stored by the capture layer as camelCase JSON
(``requestId``, ``tabId``); the models accept either spelling.
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Constants
# =============================================================================

# Identifiers carried by requests built here rather than captured.
DERIVED_REQUEST_ID = "-1"
DERIVED_TAB_ID = -1


# =============================================================================
# Enumerations
# =============================================================================


class Feature(str, Enum):
    """Operations a service can perform once its template is captured."""

    ADD_TIME = "add_time"
    VALIDATE_LESSON = "validate_lesson"


class Product(str, Enum):
    """Product variants, each with its own wire format."""

    FOUNDATIONS = "foundations"
    FLUENCY_BUILDER = "fluency_builder"


# =============================================================================
# Request
# =============================================================================


class Request(BaseModel):
    """A captured (or derived) HTTP request.

    Required fields:
        url: Absolute request URL
        method: HTTP method as captured

    Optional fields:
        headers: Header mapping, name case preserved
        body: Raw body text, None when the request had no body
        timestamp: Capture time
        request_id: Capture-layer request identifier
        tab_id: Tab the request originated from
    """

    model_config = ConfigDict(populate_by_name=True)

    url: str
    method: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: str | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    request_id: str = Field(default=DERIVED_REQUEST_ID, alias="requestId")
    tab_id: int = Field(default=DERIVED_TAB_ID, alias="tabId")

    def to_wire(self) -> str:
        """Serialize to the compact camelCase JSON used by the page context."""
        return self.model_dump_json(by_alias=True)


def copy_request(request: Request, **changes: object) -> Request:
    """Return a deep copy of ``request`` with ``changes`` applied.

    Headers are copied, so editing the copy never affects the template or
    sibling copies.
    """
    res = request.model_copy(deep=True)
    for name, value in changes.items():
        setattr(res, name, value)
    return res


def derive_request(template: Request, **changes: object) -> Request:
    """Deep copy of ``template`` marked as built here rather than captured.

    The copy carries the derived request and tab ids and a fresh timestamp.
    """
    return copy_request(
        template,
        request_id=DERIVED_REQUEST_ID,
        tab_id=DERIVED_TAB_ID,
        timestamp=datetime.now(UTC),
        **changes,
    )


__all__ = [
    "DERIVED_REQUEST_ID",
    "DERIVED_TAB_ID",
    "Feature",
    "Product",
    "Request",
    "copy_request",
    "derive_request",
]
