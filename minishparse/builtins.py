"""Builtin command recognition and argument checks."""

import errno
import os
from enum import Enum


class Builtin(Enum):
    """Commands the shell runs itself."""

    CD = 1
    PWD = 2
    ECHO = 3
    EXPORT = 4
    ENV = 5
    UNSET = 6
    EXIT = 7


_NAMES = {
    "cd": Builtin.CD,
    "pwd": Builtin.PWD,
    "echo": Builtin.ECHO,
    "export": Builtin.EXPORT,
    "env": Builtin.ENV,
    "ENV": Builtin.ENV,
    "unset": Builtin.UNSET,
    "exit": Builtin.EXIT,
}

_CD_MESSAGES = {
    errno.ENOTDIR: "Not a directory",
    errno.ENOENT: "No such file or directory",
    errno.EACCES: "Permission denied",
}


class InvalidIdentifier(ValueError):
    """An argument that is not a valid variable name for a builtin."""

    status = 1

    def __init__(self, arg, command="export"):
        super().__init__(f"{command}: `{arg}': not a valid identifier")
        self.arg = arg
        self.command = command


def builtin_kind(argv):
    """Return the :class:`Builtin` named by ``argv[0]``, or None."""
    if not argv:
        return None
    return _NAMES.get(argv[0])


def _is_name_start(char):
    return (char.isascii() and char.isalpha()) or char == "_"


def _is_name_char(char):
    return (char.isascii() and char.isalnum()) or char == "_"


def validate_export_key(arg):
    """Return the length of the variable name in an ``export`` argument.

    The name runs up to the first ``=`` or the end.  Raises
    :class:`InvalidIdentifier` if it is not a valid name.
    """
    if not arg or not _is_name_start(arg[0]):
        raise InvalidIdentifier(arg)
    name = arg.partition("=")[0]
    if not all(_is_name_char(char) for char in name[1:]):
        raise InvalidIdentifier(arg)
    return len(name)


def cd_error_message(directory, error_number):
    """Return the message ``cd`` reports when entering ``directory`` fails."""
    reason = _CD_MESSAGES.get(error_number) or os.strerror(error_number)
    return f"cd: {directory}: {reason}"