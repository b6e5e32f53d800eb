"""
Interfaces for span receivers.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.span import Span


class SpanReceiver(ABC):
    """Abstract consumer of completed spans."""

    @abstractmethod
    def receive_span(self, span: "Span") -> None:
        """
        Accept a completed span.

        Args:
            span: The span to accept

        Raises:
            ReceiverClosedError: If the receiver has been closed
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the receiver. Later calls to receive_span fail."""
        pass

    def __enter__(self) -> "SpanReceiver":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
