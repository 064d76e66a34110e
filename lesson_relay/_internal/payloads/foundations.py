"""Foundations XML payload editing.

Documents are round-tripped through lxml so the root element, its attributes
and namespace declarations are written back exactly as parsed. Child elements
are matched by local name.
"""

from collections.abc import Iterator

from lxml import etree

from lesson_relay.exceptions import MalformedPayloadError

DELTA_TIME = "delta_time"
UPDATED_AT = "updated_at"
PATH_STEP_SCORE = "path_step_score"
NUMBER_OF_CHALLENGES = "number_of_challenges"
SCORE_CORRECT = "score_correct"
PATH_STEP_MEDIA_ID = "path_step_media_id"

_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


def parse_document(data: str | bytes) -> etree._Element:
    """Parse an XML body and return its root element."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        return etree.fromstring(data, parser=_PARSER)
    except etree.XMLSyntaxError as e:
        raise MalformedPayloadError(f"Body is not a valid XML document: {e}") from e


def serialize(element: etree._Element) -> str:
    """Serialize an element without its tail text or an XML declaration."""
    return etree.tostring(element, encoding="unicode", with_tail=False)


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def find_descendant(element: etree._Element, name: str) -> etree._Element | None:
    """First descendant element (the element itself excluded) named ``name``."""
    for child in element.iterdescendants(etree.Element):
        if _local_name(child) == name:
            return child
    return None


def _require(element: etree._Element, name: str) -> etree._Element:
    found = find_descendant(element, name)
    if found is None:
        raise MalformedPayloadError(f"<{_local_name(element)}> has no <{name}> element")
    return found


def _set_text(element: etree._Element, text: str) -> None:
    del element[:]
    element.text = text


def apply_time_chunk(body: str, chunk_ms: int, now_ms: int) -> str:
    """Rewrite ``delta_time`` and ``updated_at`` of a time document.

    Args:
        body: The captured XML body.
        chunk_ms: Milliseconds to report for this request.
        now_ms: Current time in epoch milliseconds.

    Returns:
        The edited document, root element unchanged.
    """
    root = parse_document(body)
    _set_text(_require(root, DELTA_TIME), str(chunk_ms))
    _set_text(_require(root, UPDATED_AT), str(now_ms))
    return serialize(root)


def iter_unsatisfied_steps(root: etree._Element) -> Iterator[tuple[str, etree._Element]]:
    """Yield ``(media_id, element)`` for each step score that is not complete.

    A step is complete when ``score_correct`` equals ``number_of_challenges``.
    Steps without a media id cannot be addressed and are skipped.
    """
    # Snapshot so callers may edit yielded steps while iterating.
    for element in list(root.iter(etree.Element)):
        if _local_name(element) != PATH_STEP_SCORE:
            continue
        challenges = _require(element, NUMBER_OF_CHALLENGES).text or ""
        correct = _require(element, SCORE_CORRECT).text or ""
        if correct == challenges:
            continue
        media = find_descendant(element, PATH_STEP_MEDIA_ID)
        media_id = (media.text or "") if media is not None else ""
        if not media_id:
            continue
        yield media_id, element


def mark_step_complete(element: etree._Element) -> None:
    """Set ``score_correct`` to ``number_of_challenges`` on a step score."""
    challenges = _require(element, NUMBER_OF_CHALLENGES).text or ""
    _set_text(_require(element, SCORE_CORRECT), challenges)
