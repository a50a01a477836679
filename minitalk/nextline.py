"""Line-at-a-time reading from a file descriptor."""

from __future__ import annotations

import os
from typing import Any, Iterator

BUFFER_SIZE = 1024


class LineReader:
    """Read lines from a file descriptor in chunks of *buffer_size* bytes.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, fd: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if not isinstance(fd, int):
            fd = fd.fileno()
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> str | None:
        """Return the next line, or None when no data is left."""
        while b"\n" not in self._pending:
            chunk = os.read(self._fd, self._buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        newline = self._pending.find(b"\n")
        end = len(self._pending) if newline < 0 else newline + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line