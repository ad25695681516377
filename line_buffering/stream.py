import logging
from typing import Callable, List, Literal

StreamName = Literal["stdout", "stderr"]


def default_printer(line: str, stream: StreamName) -> None:
    # Lines arrive without their separator
    print(f"[{stream}] {line}")


def labelled(cb: Callable[[str, StreamName], None], which: StreamName) -> Callable[[str], None]:
    """Adapt a ``fn(line, stream)`` callback to a single-argument line consumer."""
    def consume(line: str) -> None:
        cb(line, which)
    return consume


class LineCollector:
    """
    Line consumer that keeps every line it receives.
    Useful when output should be captured rather than mirrored.
    """
    def __init__(self) -> None:
        self.lines: List[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def __len__(self) -> int:
        return len(self.lines)

    def collected(self, sep: str = "\n") -> str:
        return sep.join(self.lines)

    def clear(self) -> None:
        self.lines.clear()


class LoggingConsumer:
    """Forwards each line to a logger at a fixed level."""

    def __init__(self, logger: logging.Logger, level: int = logging.INFO) -> None:
        self.logger = logger
        self.level = level

    def __call__(self, line: str) -> None:
        self.logger.log(self.level, "%s", line)

    def __repr__(self) -> str:
        return f"LoggingConsumer({self.logger.name!r}, {logging.getLevelName(self.level)})"
