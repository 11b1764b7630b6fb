# pipeflow

`pipeflow` runs a chain of commands the way a shell pipeline does: the first
command reads from an input file, each command's output feeds the next, and
the last command writes to an output file. All commands run at the same time,
connected by pipes.

## Usage

```
pipeflow infile "cmd1" "cmd2" ... "cmdN" outfile
```

behaves like

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

The output file is created with mode 0644 if needed and truncated. At least
two commands are required.

### Here-documents

```
pipeflow here_doc LIMITER "cmd1" "cmd2" ... "cmdN" outfile
```

behaves like

```
cmd1 << LIMITER | cmd2 | ... | cmdN >> outfile
```

Lines are read from standard input, with a `heredoc> ` prompt, until a line
equal to `LIMITER` is entered; the limiter line itself is not passed on. The
output file is appended to rather than truncated. If input ends before the
limiter, a warning is printed on standard error and what was read so far is
used.

### Commands

Each command string is split into words at unquoted spaces and tabs. Single
and double quotes group characters, spaces included, and are removed; a quote
of the other kind inside a quoted section is kept as is, as in
`"grep 'hello world'"`. An unclosed quote is an error.

A command name containing `/` that is executable is run directly; otherwise
`name` is looked up as `dir/name` in each directory of `PATH`, in order.

### Errors and exit status

The exit status is that of the last command in the chain. Error messages go
to standard error.

- Too few arguments: a message and status 1; nothing is run.
- The input file cannot be opened, or the output file cannot be opened: a
  message, and the first (respectively last) command is not started and
  counts as status 1.
- An unclosed quote or an empty command: status 1 for that command.
- A command that cannot be found: status 127.
- A command that is found but cannot be executed: status 126.
- A command killed by signal N: status 128 + N.

A command that could not be started produces no output, so the command after
it reads an empty input; the rest of the chain still runs.

## What it does not do

`pipeflow` is not a shell. Inside a command string there is no redirection,
no nested pipes, no variable or `~` expansion, no globbing and no backslash
escapes: a command string is only split into words and run.

## Library use

The pieces are usable on their own:

- `pipeflow.config`: `parse_arguments(argv)` turns the arguments after the
  program name into a frozen `Pipeline` (`commands`, `outfile`, `infile`,
  `limiter`, `here_doc`), raising `UsageError` when there are too few;
  `is_here_doc`, `open_infile` and `open_outfile(path, append=False)`.
- `pipeflow.runner`: `run_pipeline(pipeline, env=None, stdin=None,
  stderr=None)` runs a `Pipeline` and returns its exit status;
  `exit_status(returncode)` maps a return code to a shell-style status.
- `pipeflow.lexer`: `tokenize(text)` splits a command line into words,
  raising `QuoteError` on an unclosed quote.
- `pipeflow.resolve`: `get_args`, `find_in_path(env, command)` and
  `resolve_command(name, env)`, which raises `CommandNotFound`.
- `pipeflow.heredoc`: `read_here_doc(limiter, source=None, prompt=None,
  errors=None)` collects lines from a descriptor or an iterable of lines.
- `pipeflow.reader`: `LineReader(fd, buffer_size=42)` reads newline-terminated
  lines from a file descriptor; `read_line()` returns `None` at the end, and
  the reader is iterable.
- `pipeflow.cli`: `main(argv=None)`, the `pipeflow` command.

General helpers with C library behaviour are included as well:

- `pipeflow.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`, `atoi`, `itoa`.
- `pipeflow.strings`: `strchr`, `strrchr`, `strncmp`, `strnstr`, `substr`,
  `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`, `strlcpy`, `strlcat`;
  search functions return an index or `None`.
- `pipeflow.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove` on `bytes` and `bytearray` objects.
- `pipeflow.linked`: `LinkedList`, a singly linked list with `push_front`,
  `push_back`, `last`, `pop_front`, `clear`, `for_each`, `map`, `len()` and
  iteration.
- `pipeflow.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to
  a text stream or a file descriptor (standard output by default).
- `pipeflow.printf`: `render(fmt, *args)` and `printf(fmt, *args,
  stream=None)` supporting `%c %s %d %i %u %x %X %p %%`.

## Tests

```
pip install -e .[test]
pytest
```