"""Split a command line into words, honouring single and double quotes."""

from __future__ import annotations

from enum import Enum, auto

_SPACES = frozenset(" \t")


class QuoteError(ValueError):
    """Raised when a quoted section is never closed."""


class _State(Enum):
    NORMAL = auto()
    SINGLE_QUOTE = auto()
    DOUBLE_QUOTE = auto()


_QUOTE_STATES = {"'": _State.SINGLE_QUOTE, '"': _State.DOUBLE_QUOTE}


def tokenize(text: str) -> list[str]:
    """Return the words of text.

    Unquoted spaces separate words. Quotes group characters, spaces
    included, and are removed; a quote of the other kind inside a quoted
    section is kept literally. Raises QuoteError if a quote is left open.
    """
    state = _State.NORMAL
    tokens: list[str] = []
    current: list[str] = []

    def finish() -> None:
        if current:
            tokens.append("".join(current))
            current.clear()

    for ch in text:
        quote_state = _QUOTE_STATES.get(ch)
        if quote_state is not None:
            if state is _State.NORMAL:
                state = quote_state
            elif state is quote_state:
                state = _State.NORMAL
            else:
                current.append(ch)
        elif ch in _SPACES:
            if state is _State.NORMAL:
                finish()
            else:
                current.append(ch)
        else:
            current.append(ch)

    if state is not _State.NORMAL:
        raise QuoteError("missing quote")
    finish()
    return tokens