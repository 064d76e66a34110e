"""Foundations service.

Foundations speaks XML. Study time is reported in increments no larger than
``MAX_CHUNK_MS``; lesson scores are read from the course endpoint and every
incomplete step is written back as fully correct.
"""

from datetime import timedelta
from urllib.parse import urlencode

from lxml import etree

from lesson_relay._internal.dispatch import DirectDispatcher, dispatch_all
from lesson_relay._internal.payloads import foundations as payload
from lesson_relay.config import RelaySettings
from lesson_relay.models import Feature, Product, Request, derive_request
from lesson_relay.services.base import Clock, Service, epoch_ms, to_milliseconds
from lesson_relay.store import SessionStore

# Largest time increment the backend accepts in one request.
MAX_CHUNK_MS = 8 * 60 * 1000


def split_duration(total_ms: int, max_chunk_ms: int = MAX_CHUNK_MS) -> list[int]:
    """Split a duration into full chunks followed by any remainder.

    >>> split_duration(1_000_000, 480_000)
    [480000, 480000, 40000]
    """
    chunks: list[int] = []
    remaining = total_ms
    while remaining > max_chunk_ms:
        chunks.append(max_chunk_ms)
        remaining -= max_chunk_ms
    if remaining > 0:
        chunks.append(remaining)
    return chunks


def validation_url(base_url: str, media_id: str) -> str:
    """Score update URL for one path step."""
    separator = "&" if "?" in base_url else "?"
    query = urlencode({"_method": "put", "path_step_media_id": media_id})
    return f"{base_url}{separator}{query}"


def build_validation_requests(base: Request, root: etree._Element) -> list[Request]:
    """Build one score update per incomplete step of a course document.

    Edits the matching elements of ``root`` in place.
    """
    requests: list[Request] = []
    for media_id, element in payload.iter_unsatisfied_steps(root):
        payload.mark_step_complete(element)
        requests.append(
            Request(
                url=validation_url(base.url, media_id),
                method="POST",
                headers=dict(base.headers),
                body=payload.serialize(element),
            )
        )
    return requests


class FoundationsService(Service):
    """Foundations variant.

    Its endpoints do not check Origin, so requests go out directly and
    batches are sent concurrently.
    """

    product = Product.FOUNDATIONS
    max_chunk_ms: int = MAX_CHUNK_MS

    def __init__(
        self,
        store: SessionStore,
        dispatcher: DirectDispatcher,
        settings: RelaySettings | None = None,
        *,
        clock: Clock = epoch_ms,
        owns_dispatcher: bool = False,
    ) -> None:
        """Initialize the service.

        Args:
            store: Session store holding captured templates.
            dispatcher: Direct dispatcher, also used for the score read.
            settings: Shared settings; defaults apply when omitted.
            clock: Source of the current time in epoch milliseconds.
            owns_dispatcher: Close ``dispatcher`` when the service is closed.
        """
        super().__init__(store, settings, owned=[dispatcher] if owns_dispatcher else ())
        self._dispatcher = dispatcher
        self._clock = clock

    def create_time_request(self, base: Request, time_ms: int) -> Request:
        """Copy ``base`` reporting ``time_ms`` as of now."""
        body = payload.apply_time_chunk(base.body, time_ms, self._clock())
        return derive_request(base, body=body)

    def get_time_requests(self, base: Request, time: timedelta) -> list[Request]:
        """One request per chunk of ``time``, none for a zero duration."""
        return [
            self.create_time_request(base, chunk)
            for chunk in split_duration(to_milliseconds(time), self.max_chunk_ms)
        ]

    async def generate_validate_requests(self, base: Request) -> list[Request]:
        """Read current scores and build updates for incomplete steps."""
        response = await self._dispatcher.fetch(base)
        root = payload.parse_document(response.content)
        return build_validation_requests(base, root)

    async def add_time(self, time: timedelta) -> None:
        template = await self._require_request(self.key_for(Feature.ADD_TIME), "Could not add time")

        requests = self.get_time_requests(template, time)
        self._log_debug(f"Sending {len(requests)} time request(s)")
        for request in requests:
            self._trace("Time request", request)

        await dispatch_all(self._dispatcher, requests)
        self._log_debug("Time requests sent")

    async def validate_lesson(self) -> None:
        template = await self._require_request(
            self.key_for(Feature.VALIDATE_LESSON), "Could not validate lesson", need_body=False
        )

        requests = await self.generate_validate_requests(template)
        self._log_debug(f"Sending {len(requests)} score update(s)")
        for request in requests:
            self._trace("Score update", request)

        await dispatch_all(self._dispatcher, requests)
        self._log_debug("Score updates sent")
