"""Example usage of line_buffering package."""

import logging

from line_buffering import LineBuffer, LineBufferConfig, LineCollector, LoggingConsumer


def main():
    """Demonstrate LineBuffer with a logging consumer and a collector."""
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    print("Line Buffering Example")

    # Mirror lines into a logger
    config = LineBufferConfig.for_host()
    with LineBuffer.from_config(LoggingConsumer(logging.getLogger("remote.stdout")), config) as buffer:
        buffer.write(b"first line" + config.separator)
        buffer.write(b"second li")
        buffer.write(b"ne" + config.separator + b"unterminated tail")

    # Capture lines for later use
    collector = LineCollector()
    with LineBuffer(collector, separator=b"\r\n") as buffer:
        buffer.write(b"a\r\nb\r\nc")

    print(f"Collected: {collector.lines}")


if __name__ == "__main__":
    main()
