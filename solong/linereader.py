"""Line-at-a-time reading of text streams through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import TextIO

BUFFER_SIZE = 5


class LineReader:
    """Reads lines from a text stream, pulling ``buffer_size`` characters at a time.

    Each line keeps its terminating newline, except possibly the last one.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def read_line(self) -> str | None:
        """Return the next line, or None once the stream is exhausted."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find("\n")
        if end == -1:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        return line

    def reset(self) -> None:
        """Discard any text read ahead but not yet returned."""
        self._pending = ""

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(path: str | PathLike[str], buffer_size: int = BUFFER_SIZE) -> list[str]:
    """Read every line of the file at ``path``, newlines kept."""
    with open(path, encoding="utf-8", errors="replace", newline="") as stream:
        return list(LineReader(stream, buffer_size))