"""Whitespace and quote normalisation of pipeline segments."""

from .quotes import DOUBLE, SINGLE, UNQUOTED, quote_state

_OPEN_STATE = {'"': DOUBLE, "'": SINGLE}


def _next_char(text, index):
    return text[index + 1] if index + 1 < len(text) else ""


def _is_whole_word(text, quote):
    """Return True if the quote at the start of ``text`` closes at a word end."""
    for index in range(1, len(text)):
        char = text[index]
        if (
            _next_char(text, index) in (" ", "")
            and quote_state(text, index + 1) == UNQUOTED
            and char == quote
        ):
            return True
        if char == " " and quote_state(text, index) == UNQUOTED:
            return False
    return False


def _copy_quoted(text, quote, keep, out):
    """Copy a quoted run from ``text`` into ``out``; return the offset consumed.

    With ``keep`` the run is a whole quoted word and its quotes are kept;
    otherwise the surrounding quotes are dropped.
    """
    if keep:
        out.append(text[0])
    index = 1
    while index < len(text):
        char = text[index]
        if char == " " and quote_state(text, index) == UNQUOTED:
            return index - 1
        if char == quote and not keep and quote_state(text, index + 1) == UNQUOTED:
            break
        if char != quote:
            out.append(char)
        elif (
            keep
            and _next_char(text, index) in (" ", "")
            and quote_state(text, index + 1) == UNQUOTED
        ):
            out.append(char)
            break
        index += 1
    return index


def _clean_at(text, index, out):
    """Handle the character at ``index``; return how far to skip beyond it."""
    char = text[index]
    if char in _OPEN_STATE:
        starts_word = index == 0 or text[index - 1] == " "
        rest = text[index:]
        if (
            starts_word
            and quote_state(text, index) == UNQUOTED
            and _is_whole_word(rest, char)
        ):
            return _copy_quoted(rest, char, True, out)
        if quote_state(text, index + 1) == _OPEN_STATE[char]:
            return _copy_quoted(rest, char, False, out)
    out.append(char)
    return 0


def clean_segment(text):
    """Trim ``text``, collapse unquoted space runs and drop inner quote pairs.

    A word that is wholly quoted keeps its quotes; quotes that open inside a
    word are removed together with their closing partner.
    """
    source = text.strip(" ")
    out = []
    size = len(source)
    index = 0
    while index < size:
        if source[index] == " " and quote_state(source, index) == UNQUOTED:
            out.append(" ")
            while index < size and source[index] == " ":
                index += 1
            continue
        index += _clean_at(source, index, out) + 1
    return "".join(out)


def clean_segments(segments):
    """Clean every pipeline segment in ``segments``."""
    return [clean_segment(segment) for segment in segments]