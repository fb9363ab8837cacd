"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, Iterator, Optional, Union

__all__ = ["LineReader"]

DEFAULT_BUFFER_SIZE = 1024

Line = Union[str, bytes]


class LineReader:
    """Yield the lines of a text or binary stream, newline included."""

    def __init__(self, stream: IO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Line] = None

    def _has_newline(self) -> bool:
        if self._pending is None:
            return False
        newline = b"\n" if isinstance(self._pending, bytes) else "\n"
        return newline in self._pending

    def read_line(self) -> Optional[Line]:
        """Return the next line with its newline, the final unterminated part, or None at the end."""
        while not self._has_newline():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        pending = self._pending
        if not pending:
            return None
        newline = b"\n" if isinstance(pending, bytes) else "\n"
        index = pending.find(newline)
        if index < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[index + 1 :]
        return pending[: index + 1]

    def __iter__(self) -> Iterator[Line]:
        """Yield lines until the stream is exhausted."""
        return iter(self.read_line, None)