import pytest

from minishparse.parser import expand_segments, parse_line, split_words
from minishparse.syntax import (
    OPEN_QUOTE_ERROR,
    PIPE_ERROR,
    REDIRECT_ERROR,
    ShellSyntaxError,
)


def test_split_words_plain():
    assert split_words(["echo hello world"]) == [["echo", "hello", "world"]]


def test_split_words_strips_quotes():
    assert split_words(['echo "a b"']) == [["echo", "a b"]]


def test_split_words_one_list_per_segment():
    segments = ["ls -l", "wc", "cat x"]
    assert len(split_words(segments)) == len(segments)


def test_expand_segments_variable():
    assert expand_segments(["echo $HOME"], {"HOME": "/h"}, 0) == ["echo /h"]


def test_expand_segments_status():
    assert expand_segments(["echo $?"], {}, 1) == ["echo 1"]


def test_expand_segments_without_dollar_unchanged():
    segments = ["echo hi", "cat"]
    assert expand_segments(segments, {"X": "y"}, 0) == segments


def test_parse_pipeline():
    assert parse_line("echo hi | cat", {}, 0) == [["echo", "hi"], ["cat"]]


@pytest.mark.parametrize("line", ["", "   ", "\n", None])
def test_parse_blank(line):
    assert parse_line(line, {}, 0) == []


def test_parse_single_quoted_word():
    assert parse_line("echo 'a b'", {}, 0) == [["echo", "a b"]]


def test_parse_expands_variable():
    assert parse_line("echo $USER", {"USER": "alice"}, 0) == [["echo", "alice"]]


def test_parse_expands_status():
    assert parse_line("echo $?", {}, 127) == [["echo", "127"]]


def test_parse_expands_tilde():
    assert parse_line("cd ~", {"HOME": "/home/user"}, 0) == [["cd", "/home/user"]]


def test_parse_spaces_redirect():
    assert parse_line("echo hi>out", {}, 0) == [["echo", "hi", ">", "out"]]


def test_open_quote_raises():
    with pytest.raises(ShellSyntaxError) as info:
        parse_line('echo "open', {}, 0)
    assert info.value.message == OPEN_QUOTE_ERROR
    assert info.value.status == 258


def test_leading_pipe_raises():
    with pytest.raises(ShellSyntaxError) as info:
        parse_line("| ls", {}, 0)
    assert info.value.message == PIPE_ERROR


def test_trailing_redirect_raises():
    with pytest.raises(ShellSyntaxError) as info:
        parse_line("echo hi >", {}, 0)
    assert info.value.message == REDIRECT_ERROR
    assert info.value.status == 258