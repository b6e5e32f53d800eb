"""
Unit tests for span receivers.
"""

import logging

import pytest

from tracespan.errors import ReceiverClosedError
from tracespan.models.milli_span import MilliSpan
from tracespan.receivers import InMemorySpanReceiver, LoggingSpanReceiver


class TestInMemorySpanReceiver:
    """Test cases for InMemorySpanReceiver."""

    def test_collects_in_arrival_order(self):
        receiver = InMemorySpanReceiver()
        spans = [MilliSpan(f"span-{i}") for i in range(3)]
        for span in spans:
            receiver.receive_span(span)

        assert receiver.get_spans() == spans
        assert receiver.get_json() == [span.to_json() for span in spans]

    def test_drops_oldest_when_full(self, caplog):
        receiver = InMemorySpanReceiver(max_spans=2)
        spans = [MilliSpan(f"span-{i}") for i in range(3)]
        with caplog.at_level(logging.WARNING):
            for span in spans:
                receiver.receive_span(span)

        assert receiver.get_spans() == spans[1:]
        assert "dropping span" in caplog.text

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            InMemorySpanReceiver(max_spans=0)

    def test_clear(self):
        receiver = InMemorySpanReceiver()
        receiver.receive_span(MilliSpan("op"))
        receiver.clear()
        assert receiver.get_spans() == []

    def test_closed_receiver_rejects_spans(self):
        with InMemorySpanReceiver() as receiver:
            receiver.receive_span(MilliSpan("op"))
        with pytest.raises(ReceiverClosedError):
            receiver.receive_span(MilliSpan("late"))
        assert len(receiver.get_spans()) == 1


class TestLoggingSpanReceiver:
    """Test cases for LoggingSpanReceiver."""

    def test_logs_wire_json(self, caplog):
        logger = logging.getLogger("tests.spans")
        receiver = LoggingSpanReceiver(logger=logger)
        span = MilliSpan("logged")
        span.stop()

        with caplog.at_level(logging.INFO, logger="tests.spans"):
            receiver.receive_span(span)

        assert caplog.records[-1].getMessage() == span.to_json()
        assert caplog.records[-1].levelno == logging.INFO

    def test_closed_receiver_rejects_spans(self):
        receiver = LoggingSpanReceiver()
        receiver.close()
        with pytest.raises(ReceiverClosedError):
            receiver.receive_span(MilliSpan("late"))
