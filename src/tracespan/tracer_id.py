"""
Providers of the tracer id stamped onto spans.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import TracingConfig


class TracerIdProvider(ABC):
    """Abstract source of the id identifying the process that produced a span."""

    @abstractmethod
    def get_tracer_id(self) -> str:
        """
        Return the tracer id.

        Returns:
            The tracer id, or "" when none is assigned
        """
        pass


class StaticTracerIdProvider(TracerIdProvider):
    """Returns a fixed tracer id."""

    def __init__(self, tracer_id: str):
        if not isinstance(tracer_id, str):
            raise TypeError(f"tracer_id must be a str, got {type(tracer_id).__name__}")
        self.tracer_id = tracer_id

    def get_tracer_id(self) -> str:
        return self.tracer_id


class ConfigTracerIdProvider(TracerIdProvider):
    """Reads the tracer id from a TracingConfig."""

    def __init__(self, config: "TracingConfig"):
        self.config = config

    def get_tracer_id(self) -> str:
        return self.config.tracer_id
