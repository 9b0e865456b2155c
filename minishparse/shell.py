"""The interactive read-parse-run loop."""

import os
import signal
import subprocess
import sys
from enum import Enum

from .environment import parse_environ, split_path
from .scan import has_input
from .status import report_wait_status
from .syntax import ShellSyntaxError
from .parser import parse_line

PROMPT = "minishell $ "
NOT_FOUND = 127
NOT_EXECUTABLE = 126


class SignalMode(Enum):
    """What the shell is doing when a signal arrives."""

    NORMAL = 0
    IN_CAT = 1
    IN_HEREDOC = 2
    IN_PARENT = 3


class _Interrupted(Exception):
    """Raised by the SIGINT handler to abandon the current prompt."""


def _wait_status(returncode):
    """Convert a subprocess return code into a raw wait status."""
    if returncode < 0:
        return -returncode
    return (returncode & 0xFF) << 8


class Shell:
    """A minimal shell: reads lines, parses them and runs the pipelines."""

    def __init__(self, environ=None, stdin=None, stderr=None):
        self.env = parse_environ(os.environ if environ is None else environ)
        self.stdin = sys.stdin if stdin is None else stdin
        self.stderr = sys.stderr if stderr is None else stderr
        self.stdout = sys.stdout
        self.status = 0
        self.path = split_path(self.env)
        self.history = []
        self.mode = SignalMode.NORMAL
        self.executor = self._execute

    @property
    def interactive(self):
        isatty = getattr(self.stdin, "isatty", None)
        return bool(isatty and isatty())

    def _error(self, message):
        self.stderr.write(message + "\n")
        self.stderr.flush()

    def _on_signal(self, signum, frame):
        if signum != signal.SIGINT:
            return
        if self.mode is SignalMode.IN_HEREDOC:
            self.stdout.write("\n")
            self.stdout.flush()
            raise SystemExit(130)
        if self.mode in (SignalMode.IN_PARENT, SignalMode.IN_CAT):
            return
        self.stdout.write("\n")
        self.stdout.flush()
        raise _Interrupted()

    def _install_signals(self):
        signal.signal(signal.SIGINT, self._on_signal)
        quit_signal = getattr(signal, "SIGQUIT", None)
        if quit_signal is not None:
            signal.signal(quit_signal, signal.SIG_IGN)

    def read_line(self):
        """Return the next input line without its newline, or None at end of input."""
        self.mode = SignalMode.NORMAL
        while True:
            try:
                if self.interactive and self.stdin is sys.stdin:
                    try:
                        return input(PROMPT)
                    except EOFError:
                        return None
                if self.interactive:
                    self.stdout.write(PROMPT)
                    self.stdout.flush()
                line = self.stdin.readline()
            except _Interrupted:
                continue
            if not line:
                return None
            return line.strip("\n")

    def run_line(self, line):
        """Parse and run ``line``; return the resulting exit status."""
        self.mode = SignalMode.NORMAL
        self.path = split_path(self.env)
        if has_input(line):
            self.history.append(line)
        try:
            pipeline = parse_line(line, self.env, self.status)
        except ShellSyntaxError as error:
            self._error(error.message)
            self.status = error.status
            return self.status
        if pipeline:
            self.status = self.executor(pipeline)
        return self.status

    def run(self):
        """Run lines until end of input and return the final exit status."""
        if self.interactive:
            self._install_signals()
        while True:
            try:
                line = self.read_line()
                if line is None:
                    break
                self.run_line(line)
            except _Interrupted:
                continue
        if self.status not in (255, 1):
            self.stderr.write("exit\n")
            self.stderr.flush()
        return self.status

    def _resolve(self, command):
        """Return the executable for ``command``, or raise with an exit code."""
        if "/" in command:
            if not os.path.exists(command):
                raise _LaunchError(command, " No such file or directory", NOT_FOUND)
            if os.path.isdir(command) or not os.access(command, os.X_OK):
                raise _LaunchError(command, " Permission denied", NOT_EXECUTABLE)
            return command
        for directory in self.path:
            candidate = os.path.join(directory, command)
            if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
                return candidate
        raise _LaunchError(command, " command not found", NOT_FOUND)

    def _execute(self, pipeline):
        """Run ``pipeline`` as chained processes and return the last stage's status."""
        processes = []
        last_failure = None
        previous = None
        self.mode = SignalMode.IN_PARENT
        try:
            for position, argv in enumerate(pipeline):
                is_last = position == len(pipeline) - 1
                stdin = previous if previous is not None else None
                if position > 0 and previous is None:
                    stdin = subprocess.DEVNULL
                previous = None
                if not argv:
                    last_failure = 0 if is_last else None
                    continue
                try:
                    program = self._resolve(argv[0])
                    process = subprocess.Popen(
                        [program, *argv[1:]],
                        stdin=stdin,
                        stdout=None if is_last else subprocess.PIPE,
                        env=self.env,
                    )
                except _LaunchError as error:
                    self._error(f"minishell: {error.command}:{error.reason}")
                    last_failure = error.code if is_last else None
                    continue
                except OSError:
                    self._error(f"minishell: {argv[0]}: Permission denied")
                    last_failure = NOT_EXECUTABLE if is_last else None
                    continue
                finally:
                    if hasattr(stdin, "close"):
                        stdin.close()
                processes.append((process, is_last))
                previous = process.stdout
                last_failure = None
            last_code = last_failure if last_failure is not None else 0
            for process, is_last in processes:
                process.wait()
                code = report_wait_status(_wait_status(process.returncode), self.stdout)
                if is_last:
                    last_code = code
            return last_code
        finally:
            self.mode = SignalMode.NORMAL


class _LaunchError(Exception):
    def __init__(self, command, reason, code):
        super().__init__(command)
        self.command = command
        self.reason = reason
        self.code = code


def main(argv=None):
    """Start the shell; return its final exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        sys.stderr.write("Invalid argument!\n")
        return 1
    return Shell().run()