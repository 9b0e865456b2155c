"""Exit codes derived from process wait statuses."""

import os
import signal
import sys

_SIGPIPE = getattr(signal, "SIGPIPE", None)
_SIGQUIT = getattr(signal, "SIGQUIT", None)

INTERRUPTED = 130
QUIT = 131
SIGNAL_BASE = 128


def _signal_code(sig):
    if sig == signal.SIGINT:
        return INTERRUPTED
    if _SIGQUIT is not None and sig == _SIGQUIT:
        return QUIT
    if _SIGPIPE is not None and sig == _SIGPIPE:
        return 0
    return SIGNAL_BASE + sig


def exit_code(status):
    """Return the shell exit code for the raw wait ``status`` of a child."""
    if os.WIFEXITED(status):
        return os.WEXITSTATUS(status)
    if os.WIFSIGNALED(status):
        return _signal_code(os.WTERMSIG(status))
    return 0


def report_wait_status(status, stream=None):
    """Return the exit code for ``status``, reporting signal deaths on ``stream``.

    An interrupted child gets a newline written, a quit child the message
    ``Quit (core dumped)``.
    """
    if stream is None:
        stream = sys.stdout
    if os.WIFSIGNALED(status):
        sig = os.WTERMSIG(status)
        if sig == signal.SIGINT:
            stream.write("\n")
        elif _SIGQUIT is not None and sig == _SIGQUIT:
            stream.write("Quit (core dumped)\n")
        stream.flush()
        return _signal_code(sig)
    if os.WIFEXITED(status):
        return os.WEXITSTATUS(status)
    return 0