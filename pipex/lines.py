"""Buffered line reading from a stream or a file descriptor."""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional, Union

Chunk = Union[str, bytes]

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Read lines, each ending in a newline except possibly the last."""

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(stream, int) and stream < 0:
            raise ValueError("file descriptor must not be negative")
        self._stream = stream
        self._size = buffer_size
        self._buffer: Optional[Chunk] = None
        self._newline: Chunk = "\n"

    def _read(self) -> Chunk:
        if isinstance(self._stream, int):
            return os.read(self._stream, self._size)
        return self._stream.read(self._size)

    def _fill(self) -> None:
        """Read chunks until the buffer holds a newline or input runs out."""
        while self._buffer is None or self._newline not in self._buffer:
            chunk = self._read()
            if not chunk:
                return
            if self._buffer is None:
                self._buffer = chunk
                self._newline = b"\n" if isinstance(chunk, bytes) else "\n"
            else:
                self._buffer = self._buffer + chunk

    def readline(self) -> Optional[Chunk]:
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        buffer = self._buffer
        if not buffer:
            return None
        end = buffer.find(self._newline)
        if end == -1:
            self._buffer = buffer[:0]
            return buffer
        self._buffer = buffer[end + 1:]
        return buffer[: end + 1]

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line