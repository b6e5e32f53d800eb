"""
Tracing configuration.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import os

from dotenv import load_dotenv

from .builder import SpanBuilder
from .models.null_span import NULL_SPAN
from .models.span import Span
from .tracer_id import ConfigTracerIdProvider

logger = logging.getLogger(__name__)

ENV_TRACER_ID = "TRACESPAN_TRACER_ID"
ENV_MAX_BUFFERED_SPANS = "TRACESPAN_MAX_BUFFERED_SPANS"
ENV_ENABLED = "TRACESPAN_ENABLED"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class TracingConfig:
    """Process-wide tracing settings, injected into span producers."""
    tracer_id: str = ""
    max_buffered_spans: Optional[int] = None
    enabled: bool = True

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "TracingConfig":
        """
        Build a configuration from environment variables.

        A ``.env`` file is loaded first; variables already set in the
        environment take precedence over it.

        Args:
            dotenv_path: Optional explicit path to a .env file

        Returns:
            The resolved TracingConfig

        Raises:
            ValueError: If a numeric or boolean variable cannot be parsed
        """
        load_dotenv(dotenv_path)

        max_spans_raw = os.getenv(ENV_MAX_BUFFERED_SPANS)
        max_buffered_spans = None
        if max_spans_raw:
            try:
                max_buffered_spans = int(max_spans_raw)
            except ValueError:
                raise ValueError(f"{ENV_MAX_BUFFERED_SPANS} must be an integer, got {max_spans_raw!r}") from None
            if max_buffered_spans <= 0:
                raise ValueError(f"{ENV_MAX_BUFFERED_SPANS} must be positive, got {max_buffered_spans}")

        enabled_raw = (os.getenv(ENV_ENABLED) or "true").strip().lower()
        if enabled_raw in _TRUE_VALUES:
            enabled = True
        elif enabled_raw in _FALSE_VALUES:
            enabled = False
        else:
            raise ValueError(f"{ENV_ENABLED} must be a boolean, got {enabled_raw!r}")

        config = cls(
            tracer_id=os.getenv(ENV_TRACER_ID, ""),
            max_buffered_spans=max_buffered_spans,
            enabled=enabled,
        )
        logger.debug(f"Loaded tracing config: {config}")
        return config

    def new_span(self, description: str) -> Span:
        """
        Start a span using this configuration.

        Returns NULL_SPAN when tracing is disabled, otherwise a running
        MilliSpan stamped with the configured tracer id.
        """
        if not self.enabled:
            return NULL_SPAN
        return (SpanBuilder()
                .description(description)
                .tracer_id_provider(ConfigTracerIdProvider(self))
                .build())
