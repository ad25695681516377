"""Byte sink that splits written bytes into lines for a line consumer."""

import codecs
import logging
from typing import Callable, Iterable, Optional, Union

from .config import (
    DEFAULT_GROWTH_INCREMENT,
    LineBufferConfig,
    host_separator,
    validate_growth_increment,
    validate_separator,
)
from .exceptions import BufferAllocationError, StreamClosedError

logger = logging.getLogger(__name__)

LineConsumer = Callable[[str], None]
BytesLike = Union[bytes, bytearray, memoryview]


class LineBuffer:
    """Accumulates written bytes and hands each completed line to a consumer.

    Bytes are appended one at a time to a growable buffer. Whenever the tail
    of the buffer equals the separator, the buffered line (separator
    stripped) is decoded and passed to ``consumer``. Closing the buffer
    dispatches any trailing, unterminated content as a final line.

    The buffer starts at ``growth_increment`` bytes, grows linearly by the
    same amount, and shrinks back to exactly ``growth_increment`` after
    every flush.

    Not safe for concurrent writers; use one instance per output stream.
    """

    def __init__(
        self,
        consumer: LineConsumer,
        growth_increment: int = DEFAULT_GROWTH_INCREMENT,
        separator: Optional[BytesLike] = None,
        encoding: str = "utf-8",
        errors: str = "replace",
    ) -> None:
        """Initialize an empty, open line buffer.

        Args:
            consumer: Called with each decoded line, separator excluded
            growth_increment: Initial/minimum buffer size and growth step (default: 2048)
            separator: Line terminator bytes (default: host line ending)
            encoding: Codec used to decode lines (default: utf-8)
            errors: Codec error handler (default: replace)

        Raises:
            TypeError: If consumer is not callable
            ValueError: For a non-positive increment, empty separator or unknown encoding
        """
        if not callable(consumer):
            raise TypeError(f"consumer must be callable, got {type(consumer).__name__}")
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {encoding}") from e

        self._consumer = consumer
        self._increment = validate_growth_increment(growth_increment)
        self._separator = host_separator() if separator is None else validate_separator(separator)
        self.encoding = encoding
        self.errors = errors
        self._buf = bytearray(self._increment)
        self._count = 0
        self._closed = False

    @classmethod
    def from_config(cls, consumer: LineConsumer, config: LineBufferConfig) -> "LineBuffer":
        return cls(
            consumer,
            growth_increment=config.growth_increment,
            separator=config.separator,
            encoding=config.encoding,
            errors=config.errors,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def capacity(self) -> int:
        """Currently allocated buffer size in bytes."""
        return len(self._buf)

    @property
    def growth_increment(self) -> int:
        return self._increment

    @property
    def separator(self) -> bytes:
        return self._separator

    def __len__(self) -> int:
        return self._count

    def writable(self) -> bool:
        return not self._closed

    def pending(self) -> bytes:
        """Return a copy of the bytes buffered since the last flush."""
        return bytes(self._buf[:self._count])

    def write(self, data: Union[int, BytesLike]) -> int:
        """Write a single byte (int) or a bytes-like object.

        Line boundaries are checked after every byte, so a separator that
        straddles two writes, or several separators in one write, each
        trigger a flush at the right offset.

        Returns:
            Number of bytes accepted

        Raises:
            StreamClosedError: If the buffer has been closed
            BufferAllocationError: If the buffer cannot grow
        """
        if self._closed:
            raise StreamClosedError("The stream has been closed.")

        if isinstance(data, int):
            if not 0 <= data <= 0xFF:
                raise ValueError(f"byte must be in range(0, 256), got {data}")
            self._write_byte(data)
            return 1

        if isinstance(data, str):
            raise TypeError("write() argument must be bytes-like, not str")
        chunk = bytes(data)
        for b in chunk:
            self._write_byte(b)
        return len(chunk)

    def writelines(self, chunks: Iterable[BytesLike]) -> None:
        for chunk in chunks:
            self.write(chunk)

    def _write_byte(self, b: int) -> None:
        if self._count == len(self._buf):
            self._grow()

        self._buf[self._count] = b
        self._count += 1
        if self._ends_with_separator():
            self.flush()

    def _grow(self) -> None:
        new_length = len(self._buf) + self._increment
        try:
            new_buf = bytearray(new_length)
        except MemoryError as e:
            raise BufferAllocationError(f"Cannot grow line buffer to {new_length} bytes") from e

        new_buf[:len(self._buf)] = self._buf
        self._buf = new_buf
        logger.debug(f"Line buffer grown to {new_length} bytes")

    def _ends_with_separator(self) -> bool:
        size = len(self._separator)
        if self._count < size:
            return False
        return self._buf[self._count - size:self._count] == self._separator

    def flush(self) -> None:
        """Dispatch the buffered line, if any, and reset the buffer.

        Content without a trailing separator is dispatched as-is. The reset
        happens even when decoding or the consumer raises; the exception
        then propagates to the caller and the failed line is discarded.
        """
        try:
            if self._count != 0:
                length = self._count
                if self._ends_with_separator():
                    length -= len(self._separator)
                line = self._buf[:length].decode(self.encoding, self.errors)
                self._consumer(line)
        finally:
            self._reset()

    def _reset(self) -> None:
        if len(self._buf) > self._increment:
            logger.debug(f"Line buffer shrunk from {len(self._buf)} to {self._increment} bytes")
            self._buf = bytearray(self._increment)
        self._count = 0

    def close(self) -> None:
        """Flush any trailing partial line, then refuse further writes.

        Calling close again flushes an empty buffer, which dispatches nothing.
        The buffer is marked closed even if the final flush raises.
        """
        try:
            self.flush()
        finally:
            self._closed = True
            logger.debug("Line buffer closed")

    def __enter__(self) -> "LineBuffer":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        status = "closed" if self._closed else "open"
        return (
            f"LineBuffer(separator={self._separator!r}, buffered={self._count}, "
            f"capacity={len(self._buf)}, {status})"
        )
