"""Turn an input line into the argument lists of a pipeline."""

from .cleaner import clean_segments
from .expand import count_dollars, expand_dollars
from .pipes import quoted_split
from .redirects import space_all_redirects
from .scan import has_input, strip_outer_quotes
from .syntax import REDIRECT_ERROR, ShellSyntaxError, check_line, has_redirection_error
from .tilde import expand_tildes


def expand_segments(segments, env, last_status=0):
    """Expand ``$`` parameters in each segment that holds any."""
    return [
        expand_dollars(segment, env, last_status) if count_dollars(segment) else segment
        for segment in segments
    ]


def split_words(segments):
    """Split each segment into words on unquoted spaces and strip outer quotes."""
    return [
        [strip_outer_quotes(word) for word in quoted_split(segment, " ")]
        for segment in segments
    ]


def parse_line(line, env, last_status=0):
    """Parse ``line`` into one argument list per pipeline stage.

    Blank input gives an empty list.  Unclosed quotes, misplaced pipes and bad
    redirections raise :class:`ShellSyntaxError`.
    """
    if not has_input(line):
        return []
    line = line.strip(" ")
    if not line:
        return []
    check_line(line)
    cleaned = clean_segments(quoted_split(line, "|"))
    if has_redirection_error(cleaned):
        raise ShellSyntaxError(REDIRECT_ERROR)
    spaced = space_all_redirects(cleaned)
    expanded = expand_segments(spaced, env, last_status)
    return split_words(expand_tildes(expanded, env))