import os
import stat

import pytest

from pipeflow.lexer import QuoteError
from pipeflow.resolve import CommandNotFound, find_in_path, get_args, resolve_command


def _make_tool(directory, name, executable=True):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    mode = stat.S_IRWXU if executable else stat.S_IRUSR | stat.S_IWUSR
    os.chmod(path, mode)
    return path


def test_get_args_splits_words():
    assert get_args("ls -l /tmp") == ["ls", "-l", "/tmp"]


def test_get_args_keeps_quoted_spaces():
    assert get_args("grep 'a b' file") == ["grep", "a b", "file"]


def test_get_args_open_quote_raises():
    with pytest.raises(QuoteError):
        get_args("echo 'oops")


def test_find_in_path_finds_executable(tmp_path):
    tool = _make_tool(tmp_path, "tool")
    assert find_in_path({"PATH": str(tmp_path)}, "tool") == str(tool)


def test_find_in_path_skips_non_executable(tmp_path):
    _make_tool(tmp_path, "tool", executable=False)
    assert find_in_path({"PATH": str(tmp_path)}, "tool") is None


def test_find_in_path_without_path_variable(tmp_path):
    _make_tool(tmp_path, "tool")
    assert find_in_path({"HOME": str(tmp_path)}, "tool") is None


def test_find_in_path_first_directory_wins(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_tool(second, "tool")
    expected = _make_tool(first, "tool")
    env = {"PATH": f"::{first}:{second}:"}
    assert find_in_path(env, "tool") == str(expected)


def test_resolve_command_with_slash_uses_path_directly(tmp_path):
    tool = _make_tool(tmp_path, "tool")
    assert resolve_command(str(tool), {}) == str(tool)


def test_resolve_command_searches_path(tmp_path):
    tool = _make_tool(tmp_path, "tool")
    assert resolve_command("tool", {"PATH": str(tmp_path)}) == str(tool)


def test_resolve_command_not_found(tmp_path):
    with pytest.raises(CommandNotFound) as info:
        resolve_command("nosuchcommand", {"PATH": str(tmp_path)})
    assert info.value.name == "nosuchcommand"
    assert "command not found -> nosuchcommand" in str(info.value)