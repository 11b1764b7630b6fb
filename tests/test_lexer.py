import pytest

from pipeflow.lexer import QuoteError, tokenize


def test_plain_words():
    assert tokenize("ls -l") == ["ls", "-l"]


def test_repeated_spaces_are_collapsed():
    assert tokenize("  wc   -l  ") == ["wc", "-l"]


def test_single_quotes_group_spaces():
    assert tokenize("grep 'hello world'") == ["grep", "hello world"]


def test_double_quotes_group_spaces():
    assert tokenize('echo "a b  c"') == ["echo", "a b  c"]


def test_other_quote_kept_inside_quotes():
    assert tokenize("echo '\"x\"'") == ["echo", '"x"']
    assert tokenize('echo "it\'s"') == ["echo", "it's"]


def test_quotes_join_adjacent_text():
    assert tokenize("'a b'c") == ["a bc"]
    assert tokenize("x'y'\"z\"") == ["xyz"]


def test_empty_input():
    assert tokenize("") == []


@pytest.mark.parametrize("text", ["echo 'abc", 'echo "abc', "'a\"", "\""])
def test_unclosed_quote(text):
    with pytest.raises(QuoteError):
        tokenize(text)


def test_quote_error_is_value_error():
    with pytest.raises(ValueError, match="missing quote"):
        tokenize("'")