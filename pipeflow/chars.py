"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_WHITESPACE = frozenset(range(9, 14)) | {32}


def _code(c: Char) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library's atoi does.

    Leading whitespace (tab through carriage return, and space) is skipped,
    one optional sign is accepted, and digits are read until the first
    non-digit. Text with no digits yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and is_digit(text[pos]):
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)