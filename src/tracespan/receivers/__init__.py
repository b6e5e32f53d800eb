# Receivers module
from .interfaces import SpanReceiver
from .memory import InMemorySpanReceiver
from .logging_receiver import LoggingSpanReceiver

__all__ = [
    "SpanReceiver",
    "InMemorySpanReceiver",
    "LoggingSpanReceiver",
]
