"""
Receiver that keeps spans in memory.
"""

from collections import deque
from typing import Deque, List, Optional
import logging
import threading

from .interfaces import SpanReceiver
from ..errors import ReceiverClosedError
from ..models.span import Span


class InMemorySpanReceiver(SpanReceiver):
    """
    Buffers received spans for later inspection.

    When ``max_spans`` is set and the buffer is full, the oldest span is
    dropped to make room.
    """

    def __init__(self, max_spans: Optional[int] = None):
        if max_spans is not None and max_spans <= 0:
            raise ValueError(f"max_spans must be positive, got {max_spans}")
        self.max_spans = max_spans
        self.logger = logging.getLogger(self.__class__.__name__)
        self._spans: Deque[Span] = deque()
        self._lock = threading.Lock()
        self._closed = False

    def receive_span(self, span: Span) -> None:
        with self._lock:
            if self._closed:
                raise ReceiverClosedError("Cannot receive spans after close()")
            if self.max_spans is not None and len(self._spans) >= self.max_spans:
                dropped = self._spans.popleft()
                self.logger.warning(f"Span buffer full ({self.max_spans}), dropping span {dropped.span_id}")
            self._spans.append(span)
        self.logger.debug(f"Received span {span.span_id}")

    def get_spans(self) -> List[Span]:
        with self._lock:
            return list(self._spans)

    def get_json(self) -> List[str]:
        """Return the wire JSON of every buffered span, in arrival order."""
        return [span.to_json() for span in self.get_spans()]

    def clear(self) -> None:
        with self._lock:
            self._spans.clear()

    def close(self) -> None:
        with self._lock:
            self._closed = True
