"""
Abstract span interface shared by every span backend.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Mapping, Tuple

from .span_id import SpanId
from .timeline import TimelineAnnotation


class Span(ABC):
    """
    A timed block of execution annotated with metadata.

    Spans form a directed acyclic graph through their parent links: following
    ``parents`` repeatedly from any span ends at a span with no parents. The
    span only stores the relation; producers are responsible for never
    creating a cycle.
    """

    @abstractmethod
    def stop(self) -> None:
        """Stop the clock. Calls after the first one have no effect."""
        pass

    @property
    @abstractmethod
    def start_time_millis(self) -> int:
        """Start time, in approximate milliseconds since the epoch."""
        pass

    @property
    @abstractmethod
    def stop_time_millis(self) -> int:
        """Stop time, in approximate milliseconds since the epoch, or 0 while running."""
        pass

    @property
    @abstractmethod
    def accumulated_millis(self) -> int:
        """
        Elapsed time in milliseconds.

        The difference between stop and start once stopped, otherwise the
        time elapsed since start.
        """
        pass

    @property
    @abstractmethod
    def is_running(self) -> bool:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Textual description of the span. Never None."""
        pass

    @property
    @abstractmethod
    def span_id(self) -> SpanId:
        pass

    @property
    @abstractmethod
    def parents(self) -> Tuple[SpanId, ...]:
        """The parent ids, or an empty tuple if the span has no parents."""
        pass

    @abstractmethod
    def set_parents(self, parents: Iterable[SpanId]) -> None:
        """Replace all existing parents with ``parents``."""
        pass

    @abstractmethod
    def add_kv_annotation(self, key: str, value: str) -> None:
        """Add or overwrite a key/value annotation."""
        pass

    @abstractmethod
    def add_timeline_annotation(self, message: str) -> None:
        """Append a timeline annotation stamped with the current time."""
        pass

    @property
    @abstractmethod
    def kv_annotations(self) -> Mapping[str, str]:
        """The key/value annotations in read-only form."""
        pass

    @property
    @abstractmethod
    def timeline_annotations(self) -> Tuple[TimelineAnnotation, ...]:
        """The timeline annotations in insertion order, read-only."""
        pass

    @property
    @abstractmethod
    def tracer_id(self) -> str:
        """Id of the process the span originated from, or "" if unset."""
        pass

    @abstractmethod
    def set_tracer_id(self, tracer_id: str) -> None:
        pass

    @abstractmethod
    def child(self, description: str) -> "Span":
        """Deprecated: create a child span. Use ``tracespan.builder.child_span``."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Return the compact wire mapping for this span."""
        from ..serializer import SpanSerializer
        return SpanSerializer.to_dict(self)

    def to_json(self) -> str:
        """Return the compact wire JSON for this span."""
        from ..serializer import SpanSerializer
        return SpanSerializer.to_json(self)

    def __str__(self) -> str:
        return self.to_json()
