"""Configuration for LineBuffer instances."""

import codecs
import os
from dataclasses import dataclass

DEFAULT_GROWTH_INCREMENT = 2048


def host_separator() -> bytes:
    """Return the host's line ending as bytes (b"\\n" or b"\\r\\n")."""
    return os.linesep.encode("ascii")


@dataclass(frozen=True)
class LineBufferConfig:
    """Options recognised by LineBuffer.

    Args:
        growth_increment: Initial and minimum buffer size, and the growth step
        separator: Exact bytes that terminate a line
        encoding: Codec used to decode each dispatched line
        errors: Codec error handler (default: "replace")
    """
    growth_increment: int = DEFAULT_GROWTH_INCREMENT
    separator: bytes = b"\n"
    encoding: str = "utf-8"
    errors: str = "replace"

    def __post_init__(self) -> None:
        validate_growth_increment(self.growth_increment)
        # frozen: store the immutable bytes copy of a bytearray/memoryview separator
        object.__setattr__(self, "separator", validate_separator(self.separator))
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e

    @classmethod
    def for_host(cls, **kwargs) -> "LineBufferConfig":
        """Build a config whose separator is the host line ending."""
        return cls(separator=host_separator(), **kwargs)


def validate_growth_increment(value: int) -> int:
    # reject bools
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"growth_increment must be a positive integer, got {value!r}")
    return value


def validate_separator(value) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise ValueError(f"separator must be bytes, got {type(value).__name__}")
    separator = bytes(value)
    if not separator:
        raise ValueError("separator must not be empty")
    return separator
