"""Writing characters, strings and numbers to a stream or file descriptor."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO, Union

Stream = Union[TextIO, int, None]


def _write(text: str, stream: Stream) -> None:
    if stream is None:
        stream = sys.stdout
    if isinstance(stream, int):
        data = text.encode("utf-8")
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def put_char(char: Union[str, int], stream: Stream = None) -> None:
    """Write one character; an int is taken as a character code."""
    if isinstance(char, int):
        char = chr(char & 0xFF)
    elif len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _write(char, stream)


def put_str(text: str, stream: Stream = None) -> None:
    """Write a string."""
    _write(text, stream)


def put_endl(text: str, stream: Stream = None) -> None:
    """Write a string followed by a newline."""
    _write(text + "\n", stream)


def put_nbr(n: int, stream: Optional[Stream] = None) -> None:
    """Write an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    _write(str(n), stream)