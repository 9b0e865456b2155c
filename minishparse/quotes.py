"""Quote tracking for shell input lines."""

UNQUOTED = 0
SINGLE = 1
DOUBLE = 2


def count_quote(text, length, quote):
    """Count occurrences of ``quote`` among the first ``length`` characters of ``text``."""
    if length <= 0:
        return 0
    return text.count(quote, 0, length)


def _segment_end(text, start, quote):
    """Index of the quote closing the one at ``start``, or of the last character."""
    found = text.find(quote, start + 1)
    return found if found != -1 else len(text) - 1


def quote_state(text, length=None):
    """Return the quoting in effect after the first ``length`` characters of ``text``.

    The result is ``UNQUOTED``, ``SINGLE`` (an open single quote) or
    ``DOUBLE`` (an open double quote).  ``length`` defaults to the whole text.
    """
    if length is None:
        length = len(text)
    if length <= 0:
        return UNQUOTED
    text = text[:length]
    size = len(text)
    hidden_double = 0
    hidden_single = 0
    index = 0
    while index < size:
        char = text[index]
        has_next = index + 1 < size
        doubles = text.count('"', 0, index)
        singles = text.count("'", 0, index)
        double_open = (doubles - hidden_double) % 2
        single_open = (singles - hidden_single) % 2

        if char == '"' and has_next and (
            not single_open or (doubles > 0 and not double_open)
        ):
            end = _segment_end(text, index, '"')
            segment = text[index:end + 1]
            hidden_single += segment.count("'")
            if segment.count('"') % 2:
                return DOUBLE
            index = end + 1
            continue
        if char == "'" and has_next and (
            not double_open or (singles > 0 and not single_open)
        ):
            end = _segment_end(text, index, "'")
            segment = text[index:end + 1]
            hidden_double += segment.count('"')
            if segment.count("'") % 2:
                return SINGLE
            index = end + 1
            continue

        at_word_end = not has_next or text[index + 1] == " "
        if at_word_end and char == '"':
            if (text.count('"', 0, index + 1) - hidden_double) % 2:
                return DOUBLE
        elif at_word_end and char == "'":
            if (text.count("'", 0, index + 1) - hidden_single) % 2:
                return SINGLE
        index += 1
    return UNQUOTED