# std imports
import platform

# 3rd party
import pytest

# local
from .accessories import TestTerminal, pipe, pseudo_terminal

IS_WINDOWS = platform.system() == 'Windows'

collect_ignore = []
if IS_WINDOWS:
    collect_ignore.extend(['test_terminal.py', 'test_read_loop.py'])


@pytest.fixture
def pty_fds():
    """A pseudo-terminal, as tuple ``(master_fd, slave_fd)``."""
    with pseudo_terminal() as fds:
        yield fds


@pytest.fixture
def pipe_fds():
    """A pipe, as tuple ``(read_fd, write_fd)``."""
    with pipe() as fds:
        yield fds


@pytest.fixture
def tty_term(pty_fds):
    """Terminal reading from the slave end of a pseudo-terminal."""
    _, slave_fd = pty_fds
    return TestTerminal(keyboard_fd=slave_fd)


@pytest.fixture
def pipe_term(pipe_fds):
    """Terminal reading from a pipe, which is not a terminal."""
    read_fd, _ = pipe_fds
    return TestTerminal(keyboard_fd=read_fd)


@pytest.fixture(params=[(1, 1), (3, 2), (10, 5)])
def fb_size(request):
    """Various framebuffer sizes, as tuple ``(width, height)``."""
    return request.param
