"""
Typed exceptions raised by the span model and its collaborators.
"""


class TraceSpanError(Exception):
    """Base class for all tracespan errors."""
    pass


class SpanIdFormatError(TraceSpanError, ValueError):
    """Raised when a string is not a 32 digit hexadecimal span id."""
    pass


class SpanDecodeError(TraceSpanError, ValueError):
    """Raised when wire JSON cannot be turned back into a span."""
    pass


class SpanStateError(TraceSpanError, RuntimeError):
    pass


class ReceiverClosedError(TraceSpanError, RuntimeError):
    pass
