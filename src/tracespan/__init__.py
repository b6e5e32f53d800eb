"""
tracespan - in-memory trace spans and their compact JSON wire encoding.

This package provides:
- SpanId, a 128-bit span identifier with a stable hex string form
- Span, the abstract span interface, with MilliSpan and NullSpan backends
- SpanBuilder and child_span for constructing related spans
- SpanSerializer / SpanDeserializer for the compact wire format
- SpanReceiver and TracerIdProvider collaborator interfaces
"""

__version__ = "0.1.0"

from .models import (
    SpanId,
    TimelineAnnotation,
    Span,
    MilliSpan,
    NullSpan,
    NULL_SPAN,
    SpanGraph,
    SpanRecord,
    TimelineRecord,
)
from .builder import SpanBuilder, child_span
from .serializer import SpanSerializer, SpanDeserializer
from .tracer_id import TracerIdProvider, StaticTracerIdProvider, ConfigTracerIdProvider
from .config import TracingConfig
from .receivers import SpanReceiver, InMemorySpanReceiver, LoggingSpanReceiver
from .errors import (
    TraceSpanError,
    SpanIdFormatError,
    SpanDecodeError,
    SpanStateError,
    ReceiverClosedError,
)

__all__ = [
    "SpanId",
    "TimelineAnnotation",
    "Span",
    "MilliSpan",
    "NullSpan",
    "NULL_SPAN",
    "SpanGraph",
    "SpanBuilder",
    "child_span",
    "SpanSerializer",
    "SpanDeserializer",
    "TracerIdProvider",
    "StaticTracerIdProvider",
    "ConfigTracerIdProvider",
    "TracingConfig",
    "SpanReceiver",
    "InMemorySpanReceiver",
    "LoggingSpanReceiver",
    # Wire records
    "SpanRecord",
    "TimelineRecord",
    # Errors
    "TraceSpanError",
    "SpanIdFormatError",
    "SpanDecodeError",
    "SpanStateError",
    "ReceiverClosedError",
]
