"""
No-op span used when tracing is disabled.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Tuple
import warnings

from .span import Span
from .span_id import SpanId
from .timeline import TimelineAnnotation

_EMPTY_MAP: Mapping[str, str] = MappingProxyType({})


class NullSpan(Span):
    """
    A span that records nothing.

    It has the invalid id, no description and zero timestamps, so it
    serializes to ``{"p":[]}``. Every mutation is silently ignored.
    """

    def stop(self) -> None:
        pass

    @property
    def start_time_millis(self) -> int:
        return 0

    @property
    def stop_time_millis(self) -> int:
        return 0

    @property
    def accumulated_millis(self) -> int:
        return 0

    @property
    def is_running(self) -> bool:
        return False

    @property
    def description(self) -> str:
        return ""

    @property
    def span_id(self) -> SpanId:
        return SpanId.INVALID

    @property
    def parents(self) -> Tuple[SpanId, ...]:
        return ()

    @parents.setter
    def parents(self, parents: Iterable[SpanId]) -> None:
        pass

    def set_parents(self, parents: Iterable[SpanId]) -> None:
        pass

    def add_kv_annotation(self, key: str, value: str) -> None:
        pass

    def add_timeline_annotation(self, message: str) -> None:
        pass

    @property
    def kv_annotations(self) -> Mapping[str, str]:
        return _EMPTY_MAP

    @property
    def timeline_annotations(self) -> Tuple[TimelineAnnotation, ...]:
        return ()

    @property
    def tracer_id(self) -> str:
        return ""

    @tracer_id.setter
    def tracer_id(self, tracer_id: str) -> None:
        pass

    def set_tracer_id(self, tracer_id: str) -> None:
        pass

    def child(self, description: str) -> "NullSpan":
        warnings.warn(
            "Span.child() is deprecated, use tracespan.builder.child_span()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self

    def __repr__(self) -> str:
        return "NullSpan()"


NULL_SPAN = NullSpan()
