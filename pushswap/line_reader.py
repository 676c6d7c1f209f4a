"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic


class LineReader(Generic[AnyStr]):
    """Yield lines from a text or binary stream, reading ``buffer_size`` at a time.

    Each line keeps its trailing newline; a final line without one is returned
    as is. At end of input :meth:`read_line` returns None.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 1) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._cache: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream is exhausted."""
        while True:
            if self._cache:
                newline = "\n" if isinstance(self._cache, str) else b"\n"
                index = self._cache.find(newline)  # type: ignore[arg-type]
                if index >= 0:
                    line = self._cache[: index + 1]
                    self._cache = self._cache[index + 1 :]
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._cache = chunk if self._cache is None else self._cache + chunk
        line = self._cache
        self._cache = None
        return line if line else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line