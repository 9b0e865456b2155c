"""Quote-aware splitting and pipe syntax checks."""

from .quotes import UNQUOTED, quote_state


def quoted_split(text, sep):
    """Split ``text`` on unquoted ``sep`` characters, dropping empty pieces."""
    def is_boundary(index):
        return text[index] == sep and quote_state(text, index) == UNQUOTED

    words = []
    size = len(text)
    index = 0
    while index < size:
        while index < size and is_boundary(index):
            index += 1
        start = index
        while index < size and not is_boundary(index):
            index += 1
        if index > start:
            words.append(text[start:index])
    return words


def has_pipe_error(line):
    """Return True if ``line`` starts or ends with a pipe or holds an empty pipe stage."""
    if not line:
        return False
    if line[0] == "|" or line[-1] == "|":
        return True
    size = len(line)
    index = 0
    while index < size:
        if line[index] == "|" and quote_state(line, index) == UNQUOTED:
            start = index + 1
            while index < size and line[index] in "| ":
                index += 1
            if "|" in line[start:index]:
                return True
        index += 1
    return False