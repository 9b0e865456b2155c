import pytest

from minishparse.cleaner import clean_segment, clean_segments


def test_collapses_unquoted_space_runs():
    words = ["echo", "hello", "world"]
    assert clean_segment("   ".join(words)) == " ".join(words)


def test_trims_surrounding_spaces():
    command = "ls -la"
    assert clean_segment("   " + command + "  ") == command


@pytest.mark.parametrize(
    "text",
    ['echo "a   b"', "echo 'x y'", 'echo "hello"', "plain words only"],
)
def test_whole_words_are_kept(text):
    assert clean_segment(text) == text


def test_quotes_inside_word_are_removed():
    assert clean_segment('a"b"c') == "abc"


def test_cleaning_is_idempotent_on_plain_text():
    once = clean_segment("cat    file    -n")
    assert clean_segment(once) == once


def test_clean_segments_matches_single_cleaning():
    segments = ["  ls   -l ", 'a"b"c', "echo 'x y'"]
    result = clean_segments(segments)
    assert len(result) == len(segments)
    assert result == [clean_segment(segment) for segment in segments]


def test_empty_segment():
    assert clean_segment("   ") == ""