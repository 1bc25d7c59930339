"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional, Protocol

DEFAULT_BUFFER_SIZE = 10


class _Readable(Protocol):
    def read(self, size: int = ...) -> AnyStr: ...


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, buffer_size units at a time.

    Each line keeps its trailing newline; the last line of a stream may lack
    one. Data read past a newline is kept for the next call.
    """

    def __init__(self, stream: _Readable, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive: {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._storage: Optional[AnyStr] = None
        self._newline = None

    def _append(self, chunk: AnyStr) -> None:
        if self._storage is None:
            self._storage = chunk[:0]
            self._newline = "\n" if isinstance(chunk, str) else b"\n"
        self._storage += chunk

    def _has_line(self) -> bool:
        return self._storage is not None and self._newline in self._storage

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream has no more data."""
        while not self._has_line():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._append(chunk)
        if not self._storage:
            return None
        end = self._storage.find(self._newline)
        cut = len(self._storage) if end < 0 else end + 1
        line, self._storage = self._storage[:cut], self._storage[cut:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line