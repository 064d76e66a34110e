"""Per-product services.

Each variant implements the same three operations (``is_feature_ready``,
``add_time``, ``validate_lesson``) for its product's wire format.
"""

from lesson_relay.services.base import Service
from lesson_relay.services.factory import ProductDetector, get_service
from lesson_relay.services.fluency import FluencyBuilderService
from lesson_relay.services.foundations import MAX_CHUNK_MS, FoundationsService, split_duration

__all__ = [
    "Service",
    "ProductDetector",
    "get_service",
    "FluencyBuilderService",
    "FoundationsService",
    "MAX_CHUNK_MS",
    "split_duration",
]
