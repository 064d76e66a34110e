"""Resolve the service for the product currently in use."""

import sys
from typing import Protocol, runtime_checkable

from lesson_relay._internal.dispatch import DirectDispatcher, Dispatcher
from lesson_relay.config import RelaySettings
from lesson_relay.exceptions import ProductDetectionError, RelayConfigError
from lesson_relay.models import Product
from lesson_relay.services.base import Service
from lesson_relay.services.fluency import FluencyBuilderService
from lesson_relay.services.foundations import FoundationsService
from lesson_relay.store import SessionStore


@runtime_checkable
class ProductDetector(Protocol):
    """Reports which product the active page belongs to."""

    async def detect(self) -> Product | None:
        ...


async def get_service(
    detector: ProductDetector,
    store: SessionStore,
    *,
    page_dispatcher: Dispatcher | None = None,
    direct_dispatcher: DirectDispatcher | None = None,
    settings: RelaySettings | None = None,
) -> Service:
    """Detect the product once and build its service.

    Args:
        detector: Product detector, called exactly once.
        store: Session store holding captured templates.
        page_dispatcher: Page-context dispatcher, required for Fluency Builder.
        direct_dispatcher: Direct dispatcher for Foundations. Created from
            ``settings`` when omitted, in which case the returned service
            owns it and closes it in ``aclose``.
        settings: Shared settings; defaults apply when omitted.

    Returns:
        The service variant for the detected product.

    Raises:
        ProductDetectionError: If the detector reports no supported product.
        RelayConfigError: If Fluency Builder is detected without a
            page-context dispatcher.
    """
    settings = settings or RelaySettings()
    product = await detector.detect()

    if settings.debug:
        print(f'[lesson-relay] Detected "{product}" product', file=sys.stderr)

    if product == Product.FOUNDATIONS:
        if direct_dispatcher is not None:
            return FoundationsService(store, direct_dispatcher, settings)
        return FoundationsService(
            store,
            DirectDispatcher.from_settings(settings),
            settings,
            owns_dispatcher=True,
        )
    if product == Product.FLUENCY_BUILDER:
        if page_dispatcher is None:
            raise RelayConfigError("Fluency Builder requires a page-context dispatcher")
        return FluencyBuilderService(store, page_dispatcher, settings)
    raise ProductDetectionError(f"Unsupported product: {product!r}")
