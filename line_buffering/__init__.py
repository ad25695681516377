"""Line buffering package: split written bytes into lines for a line consumer."""

from .buffer import LineBuffer
from .config import LineBufferConfig, DEFAULT_GROWTH_INCREMENT, host_separator
from .stream import LineCollector, LoggingConsumer, default_printer, labelled
from .relay import relay_channel, run_command
from .exceptions import (
    LineBufferError,
    StreamClosedError,
    BufferAllocationError,
    RelayError,
    RelayTimeoutError,
    ChannelRelayFailedError
)

__all__ = [
    "LineBuffer",
    "LineBufferConfig",
    "DEFAULT_GROWTH_INCREMENT",
    "host_separator",
    "LineCollector",
    "LoggingConsumer",
    "default_printer",
    "labelled",
    "relay_channel",
    "run_command",
    "LineBufferError",
    "StreamClosedError",
    "BufferAllocationError",
    "RelayError",
    "RelayTimeoutError",
    "ChannelRelayFailedError"
]
__version__ = "0.1.0"
