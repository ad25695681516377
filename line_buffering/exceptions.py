"""Custom exceptions for line_buffering package."""


class LineBufferError(Exception):
    """Base exception for line buffering errors."""
    pass


class StreamClosedError(LineBufferError):
    """Raised when bytes are written to a closed LineBuffer."""
    pass


class BufferAllocationError(LineBufferError, MemoryError):
    """Raised when the line buffer cannot grow to hold another byte."""
    pass


class RelayError(LineBufferError):
    """Base exception for channel relay errors."""
    pass


class RelayTimeoutError(RelayError):
    """Raised when a relayed command produces no output and does not exit in time."""
    pass


class ChannelRelayFailedError(RelayError):
    """Raised when reading from the remote channel fails unexpectedly."""
    pass
