import pytest

from minishparse.redirects import space_all_redirects, space_redirects


def test_output_redirect_is_spaced():
    assert space_redirects("a>b") == "a > b"


def test_append_redirect_is_spaced():
    assert space_redirects("a>>b") == "a >> b"


def test_input_redirect_is_spaced():
    assert space_redirects("cat<in") == "cat < in"


def test_heredoc_is_split_into_words():
    assert space_redirects("cat<<EOF").split() == ["cat", "<<", "EOF"]


@pytest.mark.parametrize(
    "text", ["cat < in", "echo hello", 'echo ">"', "ls >> log"]
)
def test_unchanged_segments(text):
    assert space_redirects(text) == text


@pytest.mark.parametrize("text", ["a>b", "a>>b", "cat<in", "cat<<EOF"])
def test_spacing_is_idempotent(text):
    once = space_redirects(text)
    assert space_redirects(once) == once


@pytest.mark.parametrize("text", ["a>b", "cat<in", "x>>y"])
def test_spacing_keeps_non_space_characters(text):
    assert space_redirects(text).replace(" ", "") == text


def test_space_all_redirects_maps_each_segment():
    segments = ["a>b", "echo hi", "cat<in"]
    assert space_all_redirects(segments) == [
        space_redirects(segment) for segment in segments
    ]