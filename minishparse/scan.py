"""Character scans over shell text that honour quoting."""

from .quotes import UNQUOTED, quote_state


def count_real_char(text, char):
    """Count occurrences of ``char`` in ``text``.

    An unquoted occurrence counts once.  A quoted occurrence counts once if an
    unquoted ``char`` or the end of the text is reached afterwards outside quotes.
    """
    count = 0
    size = len(text)
    index = 0
    while index < size:
        if text[index] == char:
            if quote_state(text, index) == UNQUOTED:
                count += 1
            else:
                index += 1
                while index < size:
                    if (text[index] == char or index + 1 == size) and quote_state(
                        text, index
                    ) == UNQUOTED:
                        count += 1
                        break
                    index += 1
        index += 1
    return count


def has_input(line):
    """Return True if ``line`` holds anything besides spaces and newlines."""
    if line is None:
        return False
    return any(ch not in "\n " for ch in line)


def _prefix(text, length):
    return text[:max(length, 0)]


def is_all(text, char, length):
    """Return True if the first ``length`` characters of ``text`` are all ``char``."""
    return all(ch == char for ch in _prefix(text, length))


def has_non_redirect_char(text, length):
    """Return True if the first ``length`` characters are more than redirect symbols.

    A lone quote character, or a prefix made only of spaces, also counts.
    """
    if len(text) == 1 and text in "\"'":
        return True
    if is_all(text, " ", length):
        return True
    return any(ch not in "<> " for ch in _prefix(text, length))


def strip_outer_quotes(text):
    """Remove a matching pair of surrounding quotes unless only redirects are inside."""
    if not text:
        return text
    quoted = (text[0] == '"' and text[-1] == '"') or (
        text[0] == "'" and text[-1] == "'"
    )
    inner = text[1:]
    if quoted and has_non_redirect_char(inner, len(inner) - 1):
        return text[1:-1]
    return text