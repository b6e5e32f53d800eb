"""
Receiver that writes spans to a standard library logger.
"""

from typing import Optional
import logging

from .interfaces import SpanReceiver
from ..errors import ReceiverClosedError
from ..models.span import Span


class LoggingSpanReceiver(SpanReceiver):
    """Emits the wire JSON of each received span as one log record."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self.level = level
        self._closed = False

    def receive_span(self, span: Span) -> None:
        if self._closed:
            raise ReceiverClosedError("Cannot receive spans after close()")
        self.logger.log(self.level, span.to_json())

    def close(self) -> None:
        self._closed = True
