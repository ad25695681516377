"""Pytest tests for the ready-made line consumers."""

import logging

from line_buffering.buffer import LineBuffer
from line_buffering.stream import (
    LineCollector,
    LoggingConsumer,
    default_printer,
    labelled,
)


class TestConsumers:
    """Test consumers behind a LineBuffer."""

    def test_line_collector(self):
        collector = LineCollector()
        with LineBuffer(collector, separator=b"\n") as buffer:
            buffer.write(b"Line 1\nLine 2\nno newline")

        assert collector.lines == ["Line 1", "Line 2", "no newline"]
        assert len(collector) == 3
        assert collector.collected() == "Line 1\nLine 2\nno newline"
        assert collector.collected(sep="|") == "Line 1|Line 2|no newline"

        collector.clear()
        assert collector.lines == []

    def test_default_printer_via_labelled(self, capsys):
        """Test console mirroring of stdout and stderr lines."""
        out = LineBuffer(labelled(default_printer, "stdout"), separator=b"\n")
        err = LineBuffer(labelled(default_printer, "stderr"), separator=b"\n")

        out.write(b"Starting process...\n")
        err.write(b"Warning: config not found\n")
        out.write(b"Task completed!")
        out.close()
        err.close()

        captured = capsys.readouterr()
        assert captured.out == (
            "[stdout] Starting process...\n"
            "[stderr] Warning: config not found\n"
            "[stdout] Task completed!\n"
        )

    def test_labelled_passes_stream_name(self):
        received = []
        consume = labelled(lambda line, stream: received.append((stream, line)), "stderr")

        consume("oops")

        assert received == [("stderr", "oops")]

    def test_logging_consumer(self, caplog):
        """Test that each line becomes one log record at the configured level."""
        relay_logger = logging.getLogger("tests.relay")
        consumer = LoggingConsumer(relay_logger, level=logging.WARNING)

        with caplog.at_level(logging.WARNING, logger="tests.relay"):
            with LineBuffer(consumer, separator=b"\r\n") as buffer:
                buffer.write(b"disk 91% full\r\nfan speed %d\r\n")

        assert [r.getMessage() for r in caplog.records] == ["disk 91% full", "fan speed %d"]
        assert all(r.levelno == logging.WARNING for r in caplog.records)
        assert repr(consumer) == "LoggingConsumer('tests.relay', WARNING)"
