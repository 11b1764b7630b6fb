"""Command-line arguments of a pipeline and the files at its two ends."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import BinaryIO, Optional, Sequence

HERE_DOC = "here_doc"
OUTFILE_MODE = 0o644


class UsageError(ValueError):
    """Raised when the command line has the wrong shape."""


@dataclass(frozen=True)
class Pipeline:
    """Commands to chain, where their input comes from and where output goes."""

    commands: tuple[str, ...]
    outfile: str
    infile: Optional[str] = None
    limiter: Optional[str] = None

    @property
    def here_doc(self) -> bool:
        """True when input is read up to a limiter line instead of a file."""
        return self.limiter is not None


def is_here_doc(arg: Optional[str]) -> bool:
    """True when arg is exactly the here-document keyword."""
    return arg == HERE_DOC


def parse_arguments(argv: Sequence[str]) -> Pipeline:
    """Build a Pipeline from the arguments that follow the program name.

    The forms are ``infile cmd1 cmd2 ... outfile`` and
    ``here_doc LIMITER cmd1 cmd2 ... outfile``; both need two commands at least.
    """
    args = list(argv)
    here_doc = bool(args) and is_here_doc(args[0])
    minimum = 5 if here_doc else 4
    if len(args) < minimum:
        raise UsageError("invalid nb of arguments")
    if here_doc:
        return Pipeline(commands=tuple(args[2:-1]), outfile=args[-1], limiter=args[1])
    return Pipeline(commands=tuple(args[1:-1]), outfile=args[-1], infile=args[0])


def open_infile(path: str) -> BinaryIO:
    """Open the input file for reading; raises OSError if it cannot be read."""
    return open(path, "rb")


def open_outfile(path: str, append: bool = False) -> BinaryIO:
    """Open the output file, created with mode 0644, appending or truncating."""
    flags = os.O_RDWR | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    fd = os.open(path, flags, OUTFILE_MODE)
    return os.fdopen(fd, "ab" if append else "wb")