"""Turning a command string into arguments and locating its executable."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pipeflow.lexer import tokenize
from pipeflow.strings import split


class CommandNotFound(LookupError):
    """Raised when a command is neither an executable path nor found on PATH."""

    def __init__(self, name: str) -> None:
        super().__init__(f"command not found -> {name}")
        self.name = name


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK | os.X_OK)


def get_args(text: str) -> list[str]:
    """Split a command string into its words; raises QuoteError on an open quote."""
    return tokenize(text)


def find_in_path(env: Mapping[str, str], command: str) -> Optional[str]:
    """Return the first executable ``dir/command`` over the PATH directories, or None."""
    search = env.get("PATH")
    if search is None:
        return None
    for folder in split(search, ":"):
        candidate = f"{folder}/{command}"
        if _is_executable(candidate):
            return candidate
    return None


def resolve_command(name: str, env: Mapping[str, str]) -> str:
    """Return the path to run for name.

    A name containing a slash that is itself executable is used as is;
    otherwise PATH is searched. Raises CommandNotFound when nothing fits.
    """
    if "/" in name and _is_executable(name):
        return name
    path = find_in_path(env, name)
    if path is None:
        raise CommandNotFound(name)
    return path