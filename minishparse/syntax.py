"""Syntax checks on input lines and pipeline segments."""

from .pipes import has_pipe_error
from .quotes import UNQUOTED, quote_state
from .scan import count_real_char, has_non_redirect_char

SYNTAX_STATUS = 258
OPEN_QUOTE_ERROR = "Error: Open quotation mark !"
PIPE_ERROR = "Error: Failure to use pipe !"
REDIRECT_ERROR = "Error: Redirect syntax error !"


class ShellSyntaxError(ValueError):
    """A syntax error in shell input, with the exit status it sets."""

    def __init__(self, message, status=SYNTAX_STATUS):
        super().__init__(message)
        self.message = message
        self.status = status


def _ends_with_redirect(segments):
    return any(
        segment.strip(" ").endswith((">", "<")) for segment in segments
    )


def _has_bad_operand(line, symbol, other):
    """Return True if an unquoted ``symbol`` is followed only by redirect symbols."""
    size = len(line)
    index = 0
    while index < size:
        if line[index] == symbol and quote_state(line, index) == UNQUOTED:
            if index + 1 < size and line[index + 1] == symbol:
                index += 1
            index += 1
            start = index
            while (
                index < size
                and quote_state(line, index) == UNQUOTED
                and line[index] in (symbol, other, " ")
            ):
                index += 1
            if index > start and not has_non_redirect_char(
                line[start:index], index - start
            ):
                return True
        index += 1
    return False


def has_redirection_error(segments):
    """Return True if any segment misuses a redirection operator."""
    if _ends_with_redirect(segments):
        return True
    if not any(
        count_real_char(segment, ">") or count_real_char(segment, "<")
        for segment in segments
    ):
        return False
    return any(
        _has_bad_operand(segment, ">", "<") for segment in segments
    ) or any(_has_bad_operand(segment, "<", ">") for segment in segments)


def check_line(line):
    """Return ``line`` if its quotes are closed and its pipes are well formed.

    Raises :class:`ShellSyntaxError` otherwise.
    """
    if quote_state(line, len(line)) != UNQUOTED:
        raise ShellSyntaxError(OPEN_QUOTE_ERROR)
    if has_pipe_error(line):
        raise ShellSyntaxError(PIPE_ERROR)
    return line