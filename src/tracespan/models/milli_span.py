"""
In-memory span implementation with millisecond resolution.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple
import logging
import threading
import warnings

from .span import Span
from .span_id import SpanId
from .timeline import TimelineAnnotation
from ..errors import SpanStateError
from ..utils import current_time_millis

logger = logging.getLogger(__name__)


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(f"{name} is not encodable as UTF-8: {e}") from None
    return value


def _require_millis(name: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int of epoch milliseconds, got {type(value).__name__}")
    return value


def _to_parent_tuple(parents: Iterable[SpanId]) -> Tuple[SpanId, ...]:
    if parents is None:
        raise TypeError("parents must be an iterable of SpanId, got None")
    result = tuple(parents)
    for parent in result:
        if not isinstance(parent, SpanId):
            raise TypeError(f"parent must be a SpanId, got {type(parent).__name__}")
    return result


class MilliSpan(Span):
    """
    A span held entirely in memory.

    All mutable state (stop time, parents, tracer id, key/value annotations and
    the timeline) is guarded by one lock, so a span may be annotated from
    several threads. Accessors hand out immutable copies taken under the lock.
    """

    def __init__(
        self,
        description: str = "",
        span_id: Optional[SpanId] = None,
        begin: Optional[int] = None,
        end: int = 0,
        parents: Iterable[SpanId] = (),
        tracer_id: str = "",
        trace_info: Optional[Mapping[str, str]] = None,
        timeline: Iterable[TimelineAnnotation] = (),
    ):
        """
        Initialize the span. The clock starts now unless ``begin`` is given.

        Args:
            description: Description of the traced operation
            span_id: Id to use; a random one is generated when omitted
            begin: Start time in epoch milliseconds
            end: Stop time in epoch milliseconds, 0 for a running span
            parents: Parent span ids
            tracer_id: Id of the originating tracer/process
            trace_info: Initial key/value annotations
            timeline: Initial timeline annotations
        """
        if span_id is not None and not isinstance(span_id, SpanId):
            raise TypeError(f"span_id must be a SpanId, got {type(span_id).__name__}")
        self._span_id = span_id if span_id is not None else SpanId.from_random()
        self._description = _require_str("description", description)
        self._begin = current_time_millis() if begin is None else _require_millis("begin", begin)
        self._end = _require_millis("end", end)
        self._parents = _to_parent_tuple(parents)
        self._tracer_id = _require_str("tracer_id", tracer_id)
        self._trace_info: Dict[str, str] = {}
        for key, value in (trace_info or {}).items():
            self._trace_info[_require_str("key", key)] = _require_str("value", value)
        self._timeline: List[TimelineAnnotation] = list(timeline)
        for annotation in self._timeline:
            if not isinstance(annotation, TimelineAnnotation):
                raise TypeError(f"timeline entries must be TimelineAnnotation, got {type(annotation).__name__}")
            _require_str("message", annotation.message)
        self._lock = threading.Lock()

    def stop(self) -> None:
        with self._lock:
            if self._end != 0:
                return
            if self._begin == 0:
                raise SpanStateError(f"Span for {self._description!r} has not been started")
            self._end = current_time_millis()
        logger.debug(f"Stopped span {self._span_id} after {self.accumulated_millis} ms")

    @property
    def start_time_millis(self) -> int:
        return self._begin

    @property
    def stop_time_millis(self) -> int:
        with self._lock:
            return self._end

    @property
    def accumulated_millis(self) -> int:
        with self._lock:
            end = self._end
        if end == 0:
            return current_time_millis() - self._begin
        return end - self._begin

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._end == 0

    @property
    def description(self) -> str:
        return self._description

    @property
    def span_id(self) -> SpanId:
        return self._span_id

    @property
    def parents(self) -> Tuple[SpanId, ...]:
        with self._lock:
            return self._parents

    @parents.setter
    def parents(self, parents: Iterable[SpanId]) -> None:
        self.set_parents(parents)

    def set_parents(self, parents: Iterable[SpanId]) -> None:
        new_parents = _to_parent_tuple(parents)
        with self._lock:
            self._parents = new_parents

    def add_kv_annotation(self, key: str, value: str) -> None:
        _require_str("key", key)
        _require_str("value", value)
        with self._lock:
            self._trace_info[key] = value

    def add_timeline_annotation(self, message: str) -> None:
        _require_str("message", message)
        annotation = TimelineAnnotation(time=current_time_millis(), message=message)
        with self._lock:
            self._timeline.append(annotation)

    @property
    def kv_annotations(self) -> Mapping[str, str]:
        with self._lock:
            return MappingProxyType(dict(self._trace_info))

    @property
    def timeline_annotations(self) -> Tuple[TimelineAnnotation, ...]:
        with self._lock:
            return tuple(self._timeline)

    @property
    def tracer_id(self) -> str:
        with self._lock:
            return self._tracer_id

    @tracer_id.setter
    def tracer_id(self, tracer_id: str) -> None:
        self.set_tracer_id(tracer_id)

    def set_tracer_id(self, tracer_id: str) -> None:
        _require_str("tracer_id", tracer_id)
        with self._lock:
            self._tracer_id = tracer_id

    def child(self, description: str) -> "MilliSpan":
        warnings.warn(
            "Span.child() is deprecated, use tracespan.builder.child_span()",
            DeprecationWarning,
            stacklevel=2,
        )
        from ..builder import child_span
        return child_span(self._span_id, description, tracer_id=self.tracer_id)

    def __repr__(self) -> str:
        return f"MilliSpan(span_id={self._span_id}, description={self._description!r})"
