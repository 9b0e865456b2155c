"""Environment variables as an ordered mapping."""

from collections.abc import Mapping


def parse_environ(entries):
    """Build an ordered ``{key: value}`` mapping from ``KEY=VALUE`` entries.

    An entry without ``=`` gets an empty value.  When a key repeats, the first
    occurrence wins.  A mapping is copied as it is.
    """
    if isinstance(entries, Mapping):
        return {str(key): str(value) for key, value in entries.items()}
    env = {}
    for entry in entries:
        key, _, value = entry.partition("=")
        env.setdefault(key, value)
    return env


def split_path(env):
    """Return the non-empty directories of the PATH variable in ``env``.

    The first key that is a prefix of ``PATH`` is taken as the search path.
    """
    for key, value in env.items():
        if "PATH".startswith(key):
            return [directory for directory in value.split(":") if directory]
    return []