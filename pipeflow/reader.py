"""Line-at-a-time reading from a file descriptor with a fixed read size."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Protocol, Union


class _HasFileno(Protocol):
    def fileno(self) -> int: ...


Source = Union[int, _HasFileno]

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Read newline-terminated lines from a descriptor.

    Data is pulled in chunks of at most buffer_size bytes, and whatever
    follows a returned line is kept for the next call. Lines keep their
    trailing newline; the last line of the input may lack one.
    """

    def __init__(self, fd: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if not isinstance(fd, int):
            fd = fd.fileno()
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._stash = bytearray()

    def _fill(self) -> None:
        """Read chunks until the stash holds a newline or the input ends."""
        searched = 0
        while self._stash.find(b"\n", searched) < 0:
            searched = len(self._stash)
            chunk = os.read(self._fd, self._buffer_size)
            if not chunk:
                return
            self._stash += chunk

    def read_line(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        if not self._stash:
            return None
        newline = self._stash.find(b"\n")
        end = len(self._stash) if newline < 0 else newline + 1
        line = bytes(self._stash[:end])
        del self._stash[:end]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)