import pytest

from minishparse.quotes import (
    DOUBLE,
    SINGLE,
    UNQUOTED,
    count_quote,
    quote_state,
)


def test_count_quote_respects_length():
    assert count_quote('""""', 2, '"') == 2


def test_count_quote_zero_and_negative_length():
    assert count_quote("'''", 0, "'") == 0
    assert count_quote("'''", -1, "'") == 0


def test_count_quote_other_kind_ignored():
    assert count_quote("abc", 3, '"') == 0


@pytest.mark.parametrize(
    "text",
    ["echo 'hi'", 'echo "hi"', "plain words", '"it\'s"', "'a \"b\" c'"],
)
def test_balanced_lines_are_unquoted(text):
    assert quote_state(text) == UNQUOTED


def test_unclosed_single_quote():
    assert quote_state("echo 'hi") == SINGLE


def test_unclosed_double_quote():
    assert quote_state('echo "hi') == DOUBLE


def test_trailing_double_quote_is_open():
    assert quote_state('ab"') == DOUBLE


def test_prefix_inside_single_quotes():
    assert quote_state("echo 'a b'", 7) == SINGLE


def test_prefix_inside_double_quotes():
    assert quote_state('x "a|b"', 4) == DOUBLE


def test_prefix_before_quote_is_unquoted():
    assert quote_state("echo 'a'", 5) == UNQUOTED


def test_non_positive_length_is_unquoted():
    assert quote_state("'open", 0) == UNQUOTED
    assert quote_state("'open", -3) == UNQUOTED


@pytest.mark.parametrize("text", ["'abc", '"abc', "abc", "'a' \"b"])
def test_length_beyond_end_matches_whole_text(text):
    assert quote_state(text, len(text) + 10) == quote_state(text)