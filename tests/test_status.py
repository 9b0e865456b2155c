import io
import signal

import pytest

from minishparse.status import exit_code, report_wait_status


def exited(code):
    return code << 8


@pytest.mark.parametrize("code", [0, 1, 3, 42, 255])
def test_exit_code_of_normal_exit(code):
    assert exit_code(exited(code)) == code


def test_exit_code_of_interrupt():
    assert exit_code(int(signal.SIGINT)) == 130


def test_exit_code_of_quit():
    assert exit_code(int(signal.SIGQUIT)) == 131


def test_exit_code_of_broken_pipe_is_zero():
    assert exit_code(int(signal.SIGPIPE)) == 0


def test_exit_code_of_other_signal_is_offset():
    assert exit_code(int(signal.SIGTERM)) - int(signal.SIGTERM) == 128
    assert exit_code(int(signal.SIGKILL)) - int(signal.SIGKILL) == 128


def test_report_interrupt_writes_newline():
    stream = io.StringIO()
    assert report_wait_status(int(signal.SIGINT), stream) == 130
    assert stream.getvalue() == "\n"


def test_report_quit_writes_message():
    stream = io.StringIO()
    assert report_wait_status(int(signal.SIGQUIT), stream) == 131
    assert stream.getvalue() == "Quit (core dumped)\n"


def test_report_normal_exit_is_silent():
    stream = io.StringIO()
    assert report_wait_status(exited(5), stream) == 5
    assert stream.getvalue() == ""


def test_report_agrees_with_exit_code():
    for status in (exited(0), exited(9), int(signal.SIGTERM), int(signal.SIGPIPE)):
        assert report_wait_status(status, io.StringIO()) == exit_code(status)