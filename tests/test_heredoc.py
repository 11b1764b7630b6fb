import io
import os

from pipeflow.heredoc import NO_LIMITER_WARNING, PROMPT, read_here_doc


def test_stops_at_limiter():
    prompt = io.StringIO()
    errors = io.StringIO()
    text = read_here_doc("EOF", io.StringIO("a\nb\nEOF\nc\n"), prompt, errors)
    assert text == "a\nb\n"
    assert errors.getvalue() == ""


def test_prompt_before_and_after_each_line():
    prompt = io.StringIO()
    read_here_doc("EOF", ["one\n", "EOF\n", "after\n"], prompt, io.StringIO())
    assert prompt.getvalue() == PROMPT * 3
    assert PROMPT == "heredoc> "


def test_missing_limiter_warns_and_returns_everything():
    errors = io.StringIO()
    text = read_here_doc("EOF", io.StringIO("x\ny\n"), io.StringIO(), errors)
    assert text == "x\ny\n"
    assert errors.getvalue() == "[Pipex] Warning: there is no limiter\n"


def test_limiter_prefix_is_not_the_limiter():
    errors = io.StringIO()
    text = read_here_doc("EOF", ["EOFX\n", "EOF\n"], io.StringIO(), errors)
    assert text == "EOFX\n"
    assert errors.getvalue() == ""


def test_limiter_without_newline_does_not_end():
    errors = io.StringIO()
    text = read_here_doc("EOF", ["keep\n", "EOF"], io.StringIO(), errors)
    assert text == "keep\nEOF"
    assert errors.getvalue() == NO_LIMITER_WARNING


def test_reads_from_file_descriptor():
    read_end, write_end = os.pipe()
    os.write(write_end, b"first\nsecond\nSTOP\nignored\n")
    os.close(write_end)
    try:
        text = read_here_doc("STOP", read_end, io.StringIO(), io.StringIO())
    finally:
        os.close(read_end)
    assert text == "first\nsecond\n"