"""lesson-relay: replay captured language-course requests.

Public API:
    get_service - Detect the active product and build its service
    FoundationsService, FluencyBuilderService - Service variants
    Request, Feature, Product - Shared models
    RelaySettings, StoreKeys - Configuration
    InMemorySessionStore - Session store for captured templates

Internal:
    _internal.dispatch - Direct and page-context dispatch strategies
    _internal.payloads - Wire-format editing
"""

from lesson_relay._version import __version__
from lesson_relay.config import RelaySettings, StoreKeys
from lesson_relay.models import Feature, Product, Request, copy_request
from lesson_relay.services import (
    FluencyBuilderService,
    FoundationsService,
    ProductDetector,
    Service,
    get_service,
)
from lesson_relay.store import InMemorySessionStore, SessionStore

__all__ = [
    "__version__",
    "Feature",
    "FluencyBuilderService",
    "FoundationsService",
    "InMemorySessionStore",
    "Product",
    "ProductDetector",
    "RelaySettings",
    "Request",
    "Service",
    "SessionStore",
    "StoreKeys",
    "copy_request",
    "get_service",
]
