"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import re
from typing import Any, Iterator

from pipeflow.output import Stream, put_str

_SPEC = re.compile(r"%(.)", re.DOTALL)

_UINT_MASK = 2**32 - 1
_ULONG_MASK = 2**64 - 1


def _as_int(value: Any) -> int:
    if isinstance(value, str) and len(value) == 1:
        return ord(value)
    return int(value)


def _signed32(value: int) -> int:
    return ((value + 2**31) & _UINT_MASK) - 2**31


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _ULONG_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return chr(_as_int(value) & 0xFF)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_signed32(_as_int(value)))
    if spec == "u":
        return str(_as_int(value) & _UINT_MASK)
    if spec == "x":
        return f"{_as_int(value) & _UINT_MASK:x}"
    if spec == "X":
        return f"{_as_int(value) & _UINT_MASK:X}"
    return _pointer(value)


def render(fmt: str, *args: Any) -> str:
    """Format args according to fmt and return the resulting text.

    An unknown conversion produces a lone '%' and drops the conversion
    character; a '%' at the very end is kept as is. Extra arguments are
    ignored; missing ones raise TypeError.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    remaining = iter(args)
    return _SPEC.sub(lambda match: _convert(match.group(1), remaining), fmt)


def printf(fmt: str, *args: Any, stream: Stream = None) -> int:
    """Write the formatted text to stream and return the number of characters.

    Returns -1 when writing fails.
    """
    text = render(fmt, *args)
    try:
        put_str(text, stream)
    except OSError:
        return -1
    return len(text)