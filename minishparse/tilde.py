"""Expansion of ``~`` to the home directory."""

from .quotes import UNQUOTED, quote_state
from .scan import count_real_char


def _expands_at(text, index):
    """Return True if the ``~`` at ``index`` is a standalone, unquoted home prefix."""
    if text[index] != "~" or quote_state(text, index) != UNQUOTED:
        return False
    following = text[index + 1] if index + 1 < len(text) else ""
    if following not in ("/", " ", ""):
        return False
    return index == 0 or text[index - 1] == " "


def _replace_tildes(text, home):
    pieces = []
    size = len(text)
    point = 0
    index = 0
    while index < size:
        if _expands_at(text, index):
            piece = text[point:index] + home
            point = index + 1
            if index + 1 == size - 1:
                index += 1
                piece += text[index:]
            pieces.append(piece)
        if index == size - 1 and point != index:
            pieces.append(text[point:index + 1])
        index += 1
    return "".join(pieces)


def expand_tilde(text, env):
    """Replace each word-leading unquoted ``~`` in ``text`` with ``env['HOME']``.

    A ``~`` is expanded when it starts a word and is followed by ``/``, a space
    or the end of the text.  A missing HOME expands to an empty string.
    """
    if not count_real_char(text, "~"):
        return text
    return _replace_tildes(text, env.get("HOME", ""))


def expand_tildes(segments, env):
    """Apply :func:`expand_tilde` to every segment."""
    return [expand_tilde(segment, env) for segment in segments]