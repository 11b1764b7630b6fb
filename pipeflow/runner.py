"""Running a pipeline of commands connected by pipes."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
import tempfile
from contextlib import ExitStack
from typing import IO, Mapping, Optional, Sequence, Union

from pipeflow.config import Pipeline, open_infile, open_outfile
from pipeflow.heredoc import read_here_doc
from pipeflow.lexer import QuoteError
from pipeflow.output import Stream, put_str
from pipeflow.resolve import CommandNotFound, get_args, resolve_command

Outcome = Union[subprocess.Popen, int]


def exit_status(returncode: int) -> int:
    """Map a process return code to a shell-style exit status.

    A process killed by signal N reports 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def _report(prefix: str, message: str, errors: Stream) -> None:
    put_str(f"{prefix}: {message}\n", errors)


def _report_exc(prefix: str, exc: OSError, errors: Stream) -> None:
    _report(prefix, exc.strerror or str(exc), errors)


def _open_input(path: str, errors: Stream) -> Optional[IO[bytes]]:
    try:
        return open_infile(path)
    except (FileNotFoundError, PermissionError) as exc:
        _report_exc("[Pipex] Error: access infile", exc, errors)
    except OSError as exc:
        _report_exc("[Pipex] Error: open infile", exc, errors)
    return None


def _open_output(path: str, append: bool, errors: Stream) -> Optional[IO[bytes]]:
    try:
        return open_outfile(path, append)
    except OSError as exc:
        _report_exc("[Pipex] Error: open outfile", exc, errors)
    return None


def _spawn(command: str, stdin, stdout, env: Mapping[str, str], errors: Stream) -> Outcome:
    try:
        args = get_args(command)
    except QuoteError:
        put_str("error: missing quote\n", errors)
        return 1
    if not args:
        return 1
    try:
        path = resolve_command(args[0], env)
    except CommandNotFound:
        put_str(f"[Pipex] Error: command not found -> {args[0]}\n", errors)
        return 127
    try:
        return subprocess.Popen(
            args, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        _report_exc("[Pipex] Error: execve", exc, errors)
        return 126


def _run_stages(
    commands: Sequence[str],
    infile: Optional[IO[bytes]],
    outfile: Optional[IO[bytes]],
    env: Mapping[str, str],
    errors: Stream,
) -> int:
    bad_fd = os.strerror(errno.EBADF)
    outcomes: list[Outcome] = []
    upstream: Optional[IO[bytes]] = infile
    for index, command in enumerate(commands):
        last = index == len(commands) - 1
        if index == 0 and infile is None:
            _report("[Pipex] Error: infile", bad_fd, errors)
            outcome: Outcome = 1
        elif last and outfile is None:
            _report("[Pipex] Error: outfile", bad_fd, errors)
            outcome = 1
        else:
            source = upstream if upstream is not None else subprocess.DEVNULL
            target = outfile if last else subprocess.PIPE
            outcome = _spawn(command, source, target, env, errors)
        if index > 0 and upstream is not None:
            upstream.close()
        upstream = outcome.stdout if isinstance(outcome, subprocess.Popen) and not last else None
        outcomes.append(outcome)
    statuses = [
        exit_status(outcome.wait()) if isinstance(outcome, subprocess.Popen) else outcome
        for outcome in outcomes
    ]
    return statuses[-1] if statuses else 0


def run_pipeline(
    pipeline: Pipeline,
    env: Optional[Mapping[str, str]] = None,
    stdin=None,
    stderr: Stream = None,
) -> int:
    """Run every command of pipeline, each feeding the next, and return the last one's status.

    stdin is where a here-document is read from (standard input by default);
    error messages go to stderr. A stage that cannot start gets status 1
    (bad input, output or quoting), 127 (command not found) or 126 (cannot
    execute), and the next stage then reads an empty input.
    """
    environ = os.environ if env is None else env
    errors = sys.stderr if stderr is None else stderr
    with ExitStack() as stack:
        infile: Optional[IO[bytes]] = None
        if not pipeline.here_doc:
            infile = _open_input(pipeline.infile, errors)
            if infile is not None:
                stack.enter_context(infile)
        outfile = _open_output(pipeline.outfile, pipeline.here_doc, errors)
        if outfile is not None:
            stack.enter_context(outfile)
        if pipeline.here_doc:
            text = read_here_doc(pipeline.limiter, stdin, None, errors)
            infile = stack.enter_context(tempfile.TemporaryFile())
            infile.write(text.encode("utf-8", errors="surrogateescape"))
            infile.seek(0)
        return _run_stages(pipeline.commands, infile, outfile, environ, errors)