"""Fluency Builder service."""

import hashlib
from datetime import timedelta

from lesson_relay._internal.dispatch import Dispatcher
from lesson_relay._internal.payloads import fluency as payload
from lesson_relay.config import RelaySettings
from lesson_relay.models import Feature, Product, derive_request
from lesson_relay.services.base import IdGenerator, Service, to_milliseconds, uuid1_generator
from lesson_relay.store import SessionStore


class FluencyBuilderService(Service):
    """Fluency Builder variant.

    Both endpoints check the request's Origin header, so the dispatcher
    given here is expected to send from the page context. Each call sends at
    most one request.
    """

    product = Product.FLUENCY_BUILDER

    def __init__(
        self,
        store: SessionStore,
        dispatcher: Dispatcher,
        settings: RelaySettings | None = None,
        *,
        id_generator: IdGenerator = uuid1_generator,
    ) -> None:
        """Initialize the service.

        Args:
            store: Session store holding captured templates.
            dispatcher: Strategy used to send requests (page context).
            settings: Shared settings; defaults apply when omitted.
            id_generator: Source of fresh attempt ids.
        """
        super().__init__(store, settings)
        self._dispatcher = dispatcher
        self._new_id = id_generator
        self._last_validation: str | None = None

    async def _template_ready(self, feature: Feature) -> bool:
        request = await self._get_request(self.key_for(feature))
        if feature == Feature.VALIDATE_LESSON:
            return request is not None
        if request is None or request.body is None:
            return False
        return payload.messages_ready(payload.parse_time_body(request.body))

    async def add_time(self, time: timedelta) -> None:
        total_ms = to_milliseconds(time)
        template = await self._require_request(self.key_for(Feature.ADD_TIME), "Could not add time")

        document = payload.parse_time_body(template.body)
        payload.apply_time(document, total_ms, self._new_id)
        request = derive_request(template, body=payload.dump_body(document))

        self._trace("Sending time request", request)
        await self._dispatcher.send(request)
        self._log_debug("Time request sent")

    async def validate_lesson(self) -> None:
        request = await self._require_request(
            self.key_for(Feature.VALIDATE_LESSON), "Could not validate lesson"
        )

        digest = hashlib.sha256(request.body.encode("utf-8")).hexdigest()
        if self._settings.skip_repeat_validation and digest == self._last_validation:
            self._log_debug("Validation request already sent, skipping")
            return

        # The captured mutation already carries the completion data.
        self._trace("Sending validation request", request)
        await self._dispatcher.send(request)
        self._last_validation = digest
        self._log_debug("Validation request sent")
