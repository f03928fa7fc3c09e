"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

Line = Union[str, bytes]

DEFAULT_BUFFER_SIZE = 1


class LineReader:
    """Read lines from a text or binary stream, ``buffer_size`` units per read.

    Each line keeps its trailing newline; the final line may lack one. A
    read shorter than ``buffer_size`` ends the current line even without a
    newline, and the next call reads again.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer size must be at least 1")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[Line] = None

    def _newline(self) -> Line:
        return b"\n" if isinstance(self._pending, (bytes, bytearray)) else "\n"

    def _take(self, end: int) -> Line:
        assert self._pending is not None
        line, self._pending = self._pending[:end], self._pending[end:]
        return line

    def read_line(self) -> Optional[Line]:
        """Return the next line, or None when nothing is left."""
        while True:
            if self._pending is not None:
                index = self._pending.find(self._newline())
                if index >= 0:
                    return self._take(index + 1)
            chunk = self.stream.read(self.buffer_size)
            if chunk is None:
                chunk = "" if self._pending is None else self._pending[:0]
            if self._pending is None:
                self._pending = chunk[:0]
            self._pending += chunk
            if len(chunk) < self.buffer_size:
                break
        index = self._pending.find(self._newline())
        if index >= 0:
            return self._take(index + 1)
        if not self._pending:
            return None
        return self._take(len(self._pending))

    def __iter__(self) -> Iterator[Line]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line