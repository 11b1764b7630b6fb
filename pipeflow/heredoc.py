"""Reading a here-document: input lines up to a limiter line."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from pipeflow.output import Stream, put_str
from pipeflow.reader import LineReader

PROMPT = "heredoc> "
NO_LIMITER_WARNING = "[Pipex] Warning: there is no limiter\n"

Source = Union[int, Iterable[str], None]


def _lines(source: Source) -> Iterable[str]:
    if source is None:
        return LineReader(0)
    if isinstance(source, int):
        return LineReader(source)
    return source


def read_here_doc(
    limiter: str,
    source: Source = None,
    prompt: Stream = None,
    errors: Stream = None,
) -> str:
    """Collect lines from source until one equal to limiter plus a newline.

    A prompt is written to the prompt stream before the first read and
    after each line read. If the input ends before the limiter, a warning
    goes to the errors stream. The limiter line itself is not returned.
    """
    if errors is None:
        import sys

        errors = sys.stderr
    terminator = limiter + "\n"
    collected: list[str] = []
    reached = False
    put_str(PROMPT, prompt)
    for line in _lines(source):
        put_str(PROMPT, prompt)
        if line == terminator:
            reached = True
            break
        collected.append(line)
    if not reached:
        put_str(NO_LIMITER_WARNING, errors)
    return "".join(collected)