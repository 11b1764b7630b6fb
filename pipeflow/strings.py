"""String helpers with C library semantics: searching, comparing, slicing and bounded copies."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

Char = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview]

_NUL = "\0"


def _char(c: Char) -> str:
    """Return a single character from a one-character string or an int code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def strchr(text: str, char: Char) -> Optional[int]:
    """Return the index of the first occurrence of char, or None.

    Searching for the NUL character finds the terminator at len(text).
    """
    ch = _char(char)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == _NUL else None


def strrchr(text: str, char: Char) -> Optional[int]:
    """Return the index of the last occurrence of char, or None.

    Searching for the NUL character finds the terminator at len(text).
    """
    ch = _char(char)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: Optional[str], second: Optional[str], n: int) -> int:
    """Compare at most n characters.

    Returns the code difference of the first unequal pair (the end of a
    string counting as NUL), or 0. A missing string yields -1.
    """
    if first is None or second is None:
        return -1
    if n <= 0:
        return 0
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find needle wholly inside the first length characters of haystack.

    An empty needle matches at index 0. Returns None when absent.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """Return up to length characters of text beginning at start."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters in charset from both ends of text."""
    return text.strip(charset)


def split(text: str, separator: Char) -> list[str]:
    """Split text on separator, dropping empty pieces."""
    sep = _char(separator)
    return [word for word in text.split(sep) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(buffer: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Call func(index, item) for each item, storing any non-None result in place."""
    for index, item in enumerate(buffer):
        result = func(index, item)
        if result is not None:
            buffer[index] = result


def _c_string(data: BytesLike) -> bytes:
    """Return the bytes up to, not including, the first NUL."""
    return bytes(data).split(b"\0", 1)[0]


def _check_size(dst: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dst):
        raise ValueError(f"dst holds {len(dst)} bytes, size is {size}")


def strlcpy(dst: bytearray, src: BytesLike, size: int) -> int:
    """Copy src into dst, writing at most size bytes including a NUL terminator.

    Returns the length of src, so a result >= size means truncation.
    """
    _check_size(dst, size)
    source = _c_string(src)
    if size == 0:
        return len(source)
    copied = source[:size - 1]
    dst[:len(copied) + 1] = copied + b"\0"
    return len(source)


def strlcat(dst: bytearray, src: BytesLike, size: int) -> int:
    """Append src to the NUL-terminated string in dst within a total of size bytes.

    Returns the length the full result would have had; when size does not
    exceed the existing length, returns len(src) + size and leaves dst alone.
    """
    _check_size(dst, size)
    source = _c_string(src)
    dst_len = len(_c_string(dst))
    if size <= dst_len:
        return len(source) + size
    copied = source[:size - 1 - dst_len]
    dst[dst_len:dst_len + len(copied) + 1] = copied + b"\0"
    return dst_len + len(source)