"""Line-by-line reading of text or binary streams."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 4096
_MAX_BUFFER = 0x7FFFFFFF


class LineReader(Generic[AnyStr]):
    """Read a stream one line at a time, keeping the trailing newline.

    The stream is read in chunks of ``buffer_size``; anything read past the
    current line is kept for the next call.  Works with text and binary
    streams alike.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0 or buffer_size >= _MAX_BUFFER:
            raise ValueError(f"buffer size out of range: {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._store: Optional[AnyStr] = None

    def _newline(self) -> AnyStr:
        return "\n" if isinstance(self._store, str) else b"\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while self._store is None or self._newline() not in self._store:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            self._store = chunk if self._store is None else self._store + chunk

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, newline included, or ``None`` at the end."""
        self._fill()
        if not self._store:
            self._store = None
            return None
        store = self._store
        index = store.find(self._newline())
        if index == -1:
            self._store = None
            return store
        self._store = store[index + 1:]
        return store[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.next_line, None)


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return every line of the text file at ``path``, newlines kept."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(LineReader(stream))