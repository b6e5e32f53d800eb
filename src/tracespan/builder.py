"""
Span construction helpers.
"""

from typing import Iterable, List, Mapping, Optional, TYPE_CHECKING
import logging

from .models.milli_span import MilliSpan
from .models.span_id import SpanId
from .models.timeline import TimelineAnnotation

if TYPE_CHECKING:
    from .tracer_id import TracerIdProvider

logger = logging.getLogger(__name__)


class SpanBuilder:
    """
    Fluent builder for MilliSpan.

    Example:
        span = (SpanBuilder()
                .description("read block")
                .parents([parent.span_id])
                .tracer_id("datanode-3")
                .build())
    """

    def __init__(self):
        self._begin: Optional[int] = None
        self._end = 0
        self._description = ""
        self._parents: List[SpanId] = []
        self._span_id: Optional[SpanId] = None
        self._tracer_id: Optional[str] = None
        self._tracer_id_provider: Optional["TracerIdProvider"] = None
        self._trace_info: dict = {}
        self._timeline: List[TimelineAnnotation] = []

    def begin(self, begin: int) -> "SpanBuilder":
        self._begin = begin
        return self

    def end(self, end: int) -> "SpanBuilder":
        self._end = end
        return self

    def description(self, description: str) -> "SpanBuilder":
        self._description = description
        return self

    def parents(self, parents: Iterable[SpanId]) -> "SpanBuilder":
        self._parents = list(parents)
        return self

    def span_id(self, span_id: SpanId) -> "SpanBuilder":
        self._span_id = span_id
        return self

    def tracer_id(self, tracer_id: str) -> "SpanBuilder":
        self._tracer_id = tracer_id
        return self

    def tracer_id_provider(self, provider: "TracerIdProvider") -> "SpanBuilder":
        """Resolve the tracer id from ``provider`` at build time unless one is set explicitly."""
        self._tracer_id_provider = provider
        return self

    def trace_info(self, trace_info: Mapping[str, str]) -> "SpanBuilder":
        self._trace_info = dict(trace_info)
        return self

    def timeline(self, timeline: Iterable[TimelineAnnotation]) -> "SpanBuilder":
        self._timeline = list(timeline)
        return self

    def build(self) -> MilliSpan:
        tracer_id = self._tracer_id
        if tracer_id is None:
            tracer_id = self._tracer_id_provider.get_tracer_id() if self._tracer_id_provider else ""
        return MilliSpan(
            description=self._description,
            span_id=self._span_id,
            begin=self._begin,
            end=self._end,
            parents=self._parents,
            tracer_id=tracer_id,
            trace_info=self._trace_info,
            timeline=self._timeline,
        )


def child_span(parent_id: SpanId, description: str, tracer_id: str = "") -> MilliSpan:
    """
    Create a running span whose only parent is ``parent_id``.

    Args:
        parent_id: Id of the parent span
        description: Description of the child span
        tracer_id: Tracer id to stamp on the child

    Returns:
        A new MilliSpan started now
    """
    if not isinstance(parent_id, SpanId):
        raise TypeError(f"parent_id must be a SpanId, got {type(parent_id).__name__}")
    span_id = parent_id.new_child_id() if parent_id.is_valid() else SpanId.from_random()
    logger.debug(f"Creating child span {span_id} of {parent_id}")
    return (SpanBuilder()
            .description(description)
            .parents([parent_id])
            .span_id(span_id)
            .tracer_id(tracer_id)
            .build())
