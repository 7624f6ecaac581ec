"""Line-by-line reading through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, AnyStr, Generic, IO

BUFFER_SIZE = 1048576


class LineReader(Generic[AnyStr]):
    """Read lines from a stream, ``buffer_size`` characters or bytes at a time.

    Each line keeps its newline; the last line of the stream may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Any = None

    def next_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        chunks: list[Any] = []
        while True:
            if not self._pending:
                data = self._stream.read(self._buffer_size)
                if not data:
                    self._pending = None
                    break
                self._pending = data
            pending = self._pending
            newline = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
            index = pending.find(newline)
            if index < 0:
                chunks.append(pending)
                self._pending = pending[:0]
            else:
                chunks.append(pending[: index + 1])
                self._pending = pending[index + 1 :]
                break
        if not chunks:
            return None
        return chunks[0][:0].join(chunks)

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.next_line, None)


def read_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of the text file at ``path``, newlines kept."""
    with open(path, encoding="utf-8", newline="") as stream:
        yield from LineReader(stream)