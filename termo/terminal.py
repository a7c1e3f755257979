"""Module containing :class:`Terminal`, owner of the terminal mode and cursor."""
# std imports
import os
import sys
import queue
import struct
import platform
import warnings
import contextlib
import collections
from typing import IO, Any, List, Tuple, Union, Optional, Generator

# local
from .keyboard import ScanCode, KeyReadLoop, kbhit, read_scan_code, start_key_read_loop
from .dec_modes import DecPrivateMode
from .sequences import move_yx, dec_set, dec_reset

HAS_TTY = True
try:
    import fcntl
    import termios
    import tty
except ImportError:
    _TTY_METHODS = ('start', 'stop', 'raw', 'size')
    _MSG_NOSUPPORT = (
        "One or more of the modules: 'termios', 'fcntl', and 'tty' "
        f"are not found on your platform '{platform.system()}'. "
        "The following methods of Terminal are unsupported "
        f"unless a deriving class overrides them: {', '.join(_TTY_METHODS)}."
    )
    warnings.warn(_MSG_NOSUPPORT)
    HAS_TTY = False


class NotATerminalError(OSError):
    """The keyboard file descriptor is not attached to a terminal."""

    def __init__(self, msg: str = 'not running in a terminal') -> None:
        super().__init__(msg)


class WINSZ(collections.namedtuple('WINSZ', (
        'ws_row', 'ws_col', 'ws_xpixel', 'ws_ypixel'))):
    """
    Structure represents return value of :const:`termios.TIOCGWINSZ`.

    .. py:attribute:: ws_row

        rows, in characters

    .. py:attribute:: ws_col

        columns, in characters

    .. py:attribute:: ws_xpixel

        horizontal size, pixels

    .. py:attribute:: ws_ypixel

        vertical size, pixels
    """
    #: format of termios structure
    _FMT = 'hhhh'
    #: buffer of termios structure appropriate for ioctl argument
    _BUF = b'\x00' * struct.calcsize(_FMT)


class Terminal():
    """
    Owner of the terminal's input mode, cursor visibility, and mouse tracking.

    Construction has no side effects. :meth:`start` switches the keyboard to
    raw mode and hides the cursor, :meth:`stop` undoes both and disables
    mouse reporting. Use the instance as a context manager to pair them on
    every exit path::

        with termo.init() as term:
            fb = termo.Framebuffer(*term.size())
            fb.set_text(0, 0, 'Hello, world!')
            fb.flush(term)
            term.read_scan_code()

    Instances are not thread-safe, and only one of them should be started at
    a time: the terminal device is shared by the whole process.
    """

    def __init__(self, stream: Optional[IO[str]] = None,
                 keyboard_fd: Optional[int] = None) -> None:
        """
        Initialize the terminal.

        :arg file stream: A file-like object representing the Terminal output.
            Defaults to the original value of :obj:`sys.__stdout__`. Anything
            with a ``write`` method is accepted, such as :class:`io.StringIO`.
        :arg int keyboard_fd: File descriptor of the keyboard. Defaults to
            that of :obj:`sys.__stdin__`.
        """
        #: Diagnostic messages about the environment, for troubleshooting.
        self.errors: List[str] = [
            f'parameters: stream={stream!r}, keyboard_fd={keyboard_fd!r}',
        ]
        self._stream = stream if stream is not None else sys.__stdout__
        self._keyboard_fd = keyboard_fd
        self._is_a_tty = False
        self._saved_mode: Optional[List[Any]] = None
        self._cursor = (0, 0)
        self.__init__streams()

    def __init__streams(self) -> None:
        if not hasattr(self._stream, 'write'):
            self.errors.append('stream has no write method')

        if self._keyboard_fd is None:
            try:
                if sys.__stdin__ is not None:
                    self._keyboard_fd = sys.__stdin__.fileno()
            except (AttributeError, ValueError) as err:
                self.errors.append(f'Unable to determine input stream file descriptor: {err}')

        if self._keyboard_fd is None:
            self.errors.append('No keyboard file descriptor')
        elif not HAS_TTY:
            self.errors.append('Terminal control modules are not available')
        else:
            try:
                self._is_a_tty = os.isatty(self._keyboard_fd)
            except OSError as err:
                self.errors.append(f'Unable to query keyboard file descriptor: {err}')
            if not self._is_a_tty:
                self.errors.append('Input stream is not a TTY')

    def __enter__(self) -> 'Terminal':
        if not self.started:
            self.start()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        if self.started:
            self.stop()

    @property
    def stream(self) -> IO[str]:
        """
        Read-only property: stream the terminal outputs to.

        :rtype: file-like object
        """
        return self._stream

    @property
    def keyboard_fd(self) -> Optional[int]:
        """
        Read-only property: file descriptor input is read from.

        :rtype: int or None
        """
        return self._keyboard_fd

    @property
    def is_a_tty(self) -> bool:
        """
        Read-only property: Whether :attr:`keyboard_fd` is a terminal.

        :rtype: bool
        """
        return self._is_a_tty

    @property
    def started(self) -> bool:
        """
        Read-only property: Whether :meth:`start` has been called without :meth:`stop`.

        :rtype: bool
        """
        return self._saved_mode is not None

    @property
    def cursor(self) -> Tuple[int, int]:
        """
        Read-only property: zero-based ``(x, y)`` cursor position set by :meth:`set_cursor`.

        This position is restored at the end of every :meth:`Framebuffer.flush`.

        :rtype: tuple
        """
        return self._cursor

    def write(self, text: str) -> None:
        """Write ``text`` to :attr:`stream` and flush it."""
        self._stream.write(text)
        self._stream.flush()

    def start(self) -> 'Terminal':
        """
        Switch the keyboard to raw mode and hide the cursor.

        The prior terminal mode is saved, to be restored by :meth:`stop`.
        Failure to enter raw mode is not handled: :exc:`termios.error`
        propagates to the caller.

        :raises NotATerminalError: :attr:`keyboard_fd` is not a terminal.
        :raises RuntimeError: the terminal is already started.
        :rtype: Terminal
        :returns: this instance.
        """
        if self.started:
            raise RuntimeError('Terminal already started, call stop() first')
        if not self._is_a_tty:
            raise NotATerminalError()
        save_mode = termios.tcgetattr(self._keyboard_fd)
        self._setraw()
        self._saved_mode = save_mode
        self.hide_cursor()
        return self

    def stop(self) -> None:
        """
        Restore the saved terminal mode, show the cursor and disable mouse reporting.

        A :meth:`read_scan_code` in progress is not interrupted.

        :raises RuntimeError: the terminal is not started.
        """
        if not self.started:
            raise RuntimeError('Terminal not started, call start() first')
        saved_mode, self._saved_mode = self._saved_mode, None
        termios.tcsetattr(self._keyboard_fd, termios.TCSAFLUSH, saved_mode)
        self.show_cursor()
        self.disable_mouse_events()

    def _setraw(self) -> None:
        # raw input, but output processing stays on so that '\n' maps to CR-LF
        # pylint: disable-next=possibly-used-before-assignment
        tty.setraw(self._keyboard_fd, termios.TCSANOW)
        mode = termios.tcgetattr(self._keyboard_fd)
        mode[1] |= termios.OPOST | termios.ONLCR
        termios.tcsetattr(self._keyboard_fd, termios.TCSANOW, mode)

    @contextlib.contextmanager
    def raw(self) -> Generator[None, None, None]:
        r"""
        A context manager for raw keyboard input, without cursor side effects.

        Input is switched to raw mode as by :meth:`start`: output processing
        is kept, so the newline ``'\n'`` still returns the cursor to the
        first column.
        """
        if not self._is_a_tty:
            raise NotATerminalError()
        # Save current terminal mode:
        save_mode = termios.tcgetattr(self._keyboard_fd)
        self._setraw()
        try:
            yield
        finally:
            # Restore prior mode:
            termios.tcsetattr(self._keyboard_fd, termios.TCSAFLUSH, save_mode)

    @staticmethod
    def _winsize(fd: int) -> WINSZ:
        """
        Return named tuple describing size of the terminal by ``fd``.

        :arg int fd: file descriptor queries for its window size.
        :raises OSError: the file descriptor ``fd`` is not a terminal.
        :rtype: WINSZ
        """
        # pylint: disable=protected-access
        data = fcntl.ioctl(fd, termios.TIOCGWINSZ, WINSZ._BUF)
        return WINSZ(*struct.unpack(WINSZ._FMT, data))

    def size(self) -> Tuple[int, int]:
        """
        Return current ``(width, height)`` of the terminal, in character cells.

        :raises OSError: the window size could not be determined.
        :rtype: tuple
        """
        if self._keyboard_fd is None or not HAS_TTY:
            raise NotATerminalError()
        winsize = self._winsize(self._keyboard_fd)
        return winsize.ws_col, winsize.ws_row

    def _dec_mode_set_enabled(self, *modes: Union[int, DecPrivateMode]) -> None:
        """Enable one or more DEC Private Modes (DECSET)."""
        self.write(dec_set(*modes))

    def _dec_mode_set_disabled(self, *modes: Union[int, DecPrivateMode]) -> None:
        """Disable one or more DEC Private Modes (DECRST)."""
        self.write(dec_reset(*modes))

    def hide_cursor(self) -> None:
        """Make the cursor invisible."""
        self._dec_mode_set_disabled(DecPrivateMode.DECTCEM)

    def show_cursor(self) -> None:
        """Make the cursor visible."""
        self._dec_mode_set_enabled(DecPrivateMode.DECTCEM)

    def enable_mouse_events(self) -> None:
        """
        Enable any-event mouse tracking.

        Mouse reports then arrive as scan codes, see
        :attr:`ScanCode.is_mouse_move_event` and :attr:`ScanCode.mouse_coords`.
        """
        self._dec_mode_set_enabled(DecPrivateMode.MOUSE_ALL_MOTION)

    def disable_mouse_events(self) -> None:
        """Disable any-event mouse tracking."""
        self._dec_mode_set_disabled(DecPrivateMode.MOUSE_ALL_MOTION)

    def set_cursor(self, x: int, y: int) -> None:
        """
        Move the cursor to zero-based position ``(x, y)``.

        The position is remembered, and restored at the end of every flush.
        Cursor visibility is not affected.
        """
        self._cursor = (x, y)
        self.write(move_yx(y, x))

    def kbhit(self, timeout: Optional[float] = None) -> bool:
        """
        Return whether input is awaiting to be read on :attr:`keyboard_fd`.

        :arg float timeout: seconds to wait, blocking indefinitely when None.
        :rtype: bool
        """
        if self._keyboard_fd is None:
            return False
        return kbhit(self._keyboard_fd, timeout)

    def read_scan_code(self) -> ScanCode:
        """
        Read a key press or mouse report, blocking until one arrives.

        :raises OSError: the read failed.
        :raises EOFError: end of file was reached.
        :rtype: ScanCode
        """
        if self._keyboard_fd is None:
            raise NotATerminalError()
        return read_scan_code(self._keyboard_fd)

    def start_key_read_loop(self, key_queue: 'queue.Queue[ScanCode]',
                            error_queue: 'queue.Queue[BaseException]',
                            poll_interval: Optional[float] = 0.1) -> KeyReadLoop:
        """
        Start a background thread reading scan codes into ``key_queue``.

        The first read error is put on ``error_queue``, ending the thread.
        See :class:`KeyReadLoop`.

        :rtype: KeyReadLoop
        """
        if self._keyboard_fd is None:
            raise NotATerminalError()
        return start_key_read_loop(self._keyboard_fd, key_queue, error_queue,
                                   poll_interval=poll_interval)


def init(stream: Optional[IO[str]] = None, keyboard_fd: Optional[int] = None) -> Terminal:
    """
    Create and start a :class:`Terminal`.

    :raises NotATerminalError: the keyboard is not a terminal.
    :rtype: Terminal
    """
    return Terminal(stream=stream, keyboard_fd=keyboard_fd).start()
