"""
Core data models for trace spans.
"""

from .span_id import SpanId
from .timeline import TimelineAnnotation
from .span import Span
from .milli_span import MilliSpan
from .null_span import NullSpan, NULL_SPAN
from .trace import SpanGraph
from .wire import SpanRecord, TimelineRecord

__all__ = [
    "SpanId",
    "TimelineAnnotation",
    "Span",
    "MilliSpan",
    "NullSpan",
    "NULL_SPAN",
    "SpanGraph",
    # Wire records
    "SpanRecord",
    "TimelineRecord",
]
