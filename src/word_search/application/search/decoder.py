# word_search/application/search/decoder.py
from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from word_search.application.search.mappers import frame_to_event
from word_search.application.search.schemas import StreamFrame, stream_frame_adapter
from word_search.domain.search.errors import DecodeError
from word_search.domain.search.events import InboundEvent, Unrecognized

logger = logging.getLogger(__name__)


def parse_frame(raw_payload: str) -> StreamFrame:
    """Validate one stream payload against the wire schemas; raises DecodeError."""
    try:
        return stream_frame_adapter.validate_json(raw_payload)
    except PydanticValidationError as e:
        reason = "; ".join(err["msg"] for err in e.errors(include_url=False)) or str(e)
        raise DecodeError(raw=raw_payload, reason=reason) from e


def decode(raw_payload: str) -> InboundEvent:
    """
    Turn one stream payload into an InboundEvent.

    Never raises: malformed JSON, unknown statuses and records with missing or
    invalid fields become Unrecognized so a single bad frame does not end the
    session.
    """
    try:
        frame = parse_frame(raw_payload)
    except DecodeError as e:
        logger.warning("Ignoring stream frame %r: %s", raw_payload, e.reason)
        return Unrecognized(raw=raw_payload)
    return frame_to_event(frame)
