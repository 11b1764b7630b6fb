"""Byte-buffer operations on bytes and bytearray objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_span(buffer: Buffer, n: int, offset: int = 0, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if offset < 0:
        raise ValueError("offset must not be negative")
    if offset + n > len(buffer):
        raise ValueError(f"{name} holds {len(buffer)} bytes, {offset + n} needed")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of value."""
    _check_span(buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first n bytes of buffer."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes.

    Raises OverflowError when the product exceeds the addressable size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and size > SIZE_MAX // count:
        raise OverflowError("count * size overflows")
    return bytearray(count * size)


def memchr(data: Buffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _check_span(data, n)
    index = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(first: Buffer, second: Buffer, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _check_span(first, n, name="first")
    _check_span(second, n, name="second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy n bytes from src to the start of dest."""
    _check_span(dest, n, name="dest")
    _check_span(src, n, name="src")
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dest; overlap is safe."""
    _check_span(buffer, n, dest)
    _check_span(buffer, n, src)
    if n and dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer