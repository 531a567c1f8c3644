"""Line-by-line reading from a file descriptor or stream with a fixed read size."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any

DEFAULT_BUFFER_SIZE = 42


def _has_newline(data: Any) -> bool:
    if data is None:
        return False
    newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    return newline in data


def _cut_line(data: Any) -> tuple[Any, Any]:
    """Split ``data`` after its first newline into (line, remainder)."""
    newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    line, sep, rest = data.partition(newline)
    return line + sep, rest


class LineReader:
    """Read newline-terminated lines, ``buffer_size`` units at a time.

    ``stream`` is either an integer file descriptor or an object with a
    ``read(n)`` method returning ``str`` or ``bytes``. Data read past the end
    of a line is kept for the next call.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        if isinstance(stream, int) and stream < 0:
            raise ValueError("file descriptor must not be negative")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Any = None

    def _read_chunk(self) -> Any:
        if isinstance(self._stream, int):
            return os.read(self._stream, self._buffer_size)
        return self._stream.read(self._buffer_size)

    def readline(self) -> Any:
        """Return the next line including its newline, or None at end of input."""
        pending = self._pending
        while not _has_newline(pending):
            try:
                chunk = self._read_chunk()
            except OSError:
                self._pending = None
                raise
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        line, rest = _cut_line(pending)
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[Any]:
        while (line := self.readline()) is not None:
            yield line