"""
Conversion between spans and the compact JSON wire format.

The wire object uses single letter keys, emitted in this order and only when
their condition holds:

    a  span id (hex)           id is valid
    b  start millis            start != 0
    e  stop millis             stop != 0
    d  description             non-empty
    r  tracer id               non-empty
    p  parent ids (hex)        always, possibly []
    n  key/value annotations   non-empty, keys sorted
    t  timeline annotations    non-empty, insertion order, [{"t": .., "m": ..}]
"""

from typing import Any, Dict, List, Mapping
import json
import logging

from pydantic import ValidationError

from .errors import SpanDecodeError, SpanIdFormatError
from .models.milli_span import MilliSpan
from .models.span import Span
from .models.span_id import SpanId
from .models.timeline import TimelineAnnotation
from .models.wire import SpanRecord, TimelineRecord

logger = logging.getLogger(__name__)


class SpanSerializer:
    """Stateless span to wire-format encoder."""

    @staticmethod
    def to_record(span: Span) -> SpanRecord:
        """
        Build the wire record for a span, leaving absent fields as None.

        Args:
            span: The span to encode

        Returns:
            SpanRecord ready to be dumped by alias
        """
        span_id = span.span_id
        kv_annotations = span.kv_annotations
        timeline = span.timeline_annotations
        return SpanRecord(
            span_id=str(span_id) if span_id.is_valid() else None,
            begin=span.start_time_millis or None,
            end=span.stop_time_millis or None,
            description=span.description or None,
            tracer_id=span.tracer_id or None,
            parents=[str(parent) for parent in span.parents],
            trace_info={key: kv_annotations[key] for key in sorted(kv_annotations)} or None,
            timeline=[TimelineRecord(t=tl.time, m=tl.message) for tl in timeline] or None,
        )

    @classmethod
    def to_dict(cls, span: Span) -> Dict[str, Any]:
        return cls.to_record(span).model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def to_json(cls, span: Span) -> str:
        """Encode a span as compact JSON. Identical span state gives identical bytes."""
        return cls.to_record(span).model_dump_json(by_alias=True, exclude_none=True)


class SpanDeserializer:
    """Decoder from the wire format back to in-memory spans."""

    @classmethod
    def from_json(cls, text: str) -> MilliSpan:
        """
        Decode a span from wire JSON.

        Args:
            text: JSON object as produced by SpanSerializer.to_json

        Returns:
            The decoded MilliSpan

        Raises:
            SpanDecodeError: If the text is not a valid span object
        """
        try:
            record = SpanRecord.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"Failed to decode span JSON: {e}")
            raise SpanDecodeError(f"Invalid span JSON: {e}") from e
        return cls.from_record(record)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MilliSpan:
        if not isinstance(data, Mapping):
            raise SpanDecodeError(f"Span data must be a mapping, got {type(data).__name__}")
        try:
            record = SpanRecord.model_validate(dict(data))
        except ValidationError as e:
            logger.error(f"Failed to decode span mapping: {e}")
            raise SpanDecodeError(f"Invalid span data: {e}") from e
        return cls.from_record(record)

    @staticmethod
    def from_record(record: SpanRecord) -> MilliSpan:
        try:
            span_id = SpanId.from_string(record.span_id) if record.span_id else SpanId.INVALID
            parents = [SpanId.from_string(parent) for parent in record.parents]
        except SpanIdFormatError as e:
            raise SpanDecodeError(str(e)) from e

        timeline = [TimelineAnnotation(time=tl.t, message=tl.m) for tl in record.timeline or []]
        try:
            span = MilliSpan(
                description=record.description or "",
                span_id=span_id,
                begin=record.begin or 0,
                end=record.end or 0,
                parents=parents,
                tracer_id=record.tracer_id or "",
                trace_info=record.trace_info or {},
                timeline=timeline,
            )
        except ValueError as e:
            logger.error(f"Rejected decoded span {span_id}: {e}")
            raise SpanDecodeError(str(e)) from e
        logger.debug(f"Decoded span {span_id} with {len(parents)} parents")
        return span

    @classmethod
    def from_json_array(cls, text: str) -> List[MilliSpan]:
        """Decode a JSON array of wire span objects."""
        try:
            items = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse span array JSON: {e}")
            raise SpanDecodeError(f"Invalid JSON: {e}") from e
        if not isinstance(items, list):
            logger.error(f"Expected a JSON array of spans, got {type(items).__name__}")
            raise SpanDecodeError("Expected a JSON array of spans")
        return [cls.from_dict(item) for item in items]
