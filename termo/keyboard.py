"""Sub-module providing keyboard and mouse input as raw scan codes."""
# std imports
import os
import queue
import selectors
import typing
import threading
from typing import Tuple, TypeVar, Optional

_T = TypeVar('_T', bound='ScanCode')

#: Maximum number of bytes delivered by a single read of the keyboard.
SCANCODE_SIZE = 6

#: Leading bytes of escape codes, ``ESC [``.
CSI = b'\x1b['

#: Escape codes of the cursor keys, as returned by :attr:`ScanCode.escape_code`.
ESCAPE_UP = ord('A')
ESCAPE_DOWN = ord('B')
ESCAPE_RIGHT = ord('C')
ESCAPE_LEFT = ord('D')

#: Escape code of X10-encoded mouse reports.
ESCAPE_MOUSE = ord('M')

# button byte of mouse reports, as sent in mode 1003
_MOUSE_MOVE = ord('C')
_MOUSE_DOWN = ord(' ')
_MOUSE_UP = ord('#')

# X10 mouse encoding offsets coordinates by 32, and terminal coordinates start at 1
_MOUSE_OFFSET = 33


class ScanCode(bytes):
    """
    A bytes-derived class holding the bytes delivered by a single read.

    Only the bytes actually received are kept, so ``len(scancode)`` is the
    valid length of the record, at most :data:`SCANCODE_SIZE`. A single read
    is expected to hold exactly one key press or mouse report: sequences
    split across reads are not re-assembled.
    """

    def __new__(cls: typing.Type[_T], data: bytes = b'') -> _T:
        if len(data) > SCANCODE_SIZE:
            raise ValueError(f'scan code of {len(data)} bytes exceeds '
                             f'maximum size of {SCANCODE_SIZE}')
        return bytes.__new__(cls, data)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({bytes(self)!r})'

    def padded(self) -> bytes:
        """Return the fixed-width record, zero-filled to :data:`SCANCODE_SIZE`."""
        return bytes(self).ljust(SCANCODE_SIZE, b'\x00')

    @property
    def is_escape_code(self) -> bool:
        """Whether this is an escape code, beginning with ``ESC [``."""
        return len(self) > 2 and self[:2] == CSI

    @property
    def escape_code(self) -> Optional[int]:
        """
        Byte following ``ESC [`` of an escape code.

        :rtype: int or None
        :returns: the third byte, compare with :data:`ESCAPE_UP` and
            friends, or ``None`` when :attr:`is_escape_code` is False.
        """
        if not self.is_escape_code:
            return None
        return self[2]

    def _is_mouse_event(self, button: int) -> bool:
        return (len(self) == SCANCODE_SIZE and self.is_escape_code
                and self[2] == ESCAPE_MOUSE and self[3] == button)

    @property
    def is_mouse_move_event(self) -> bool:
        """Whether this is a mouse motion report."""
        return self._is_mouse_event(_MOUSE_MOVE)

    @property
    def is_mouse_down_event(self) -> bool:
        """Whether this is a mouse button press report."""
        return self._is_mouse_event(_MOUSE_DOWN)

    @property
    def is_mouse_up_event(self) -> bool:
        """Whether this is a mouse button release report."""
        return self._is_mouse_event(_MOUSE_UP)

    @property
    def mouse_coords(self) -> Optional[Tuple[int, int]]:
        """
        Position of a mouse report.

        :rtype: tuple or None
        :returns: zero-based ``(x, y)``, where the upper-left corner is
            ``(0, 0)``, or ``None`` when this is not a mouse report.
        """
        if (len(self) != SCANCODE_SIZE or not self.is_escape_code
                or self[2] != ESCAPE_MOUSE):
            return None
        return self[4] - _MOUSE_OFFSET, self[5] - _MOUSE_OFFSET

    @property
    def rune(self) -> str:
        """
        First character of this scan code, decoded as UTF-8.

        Only meaningful when :attr:`is_escape_code` is False. An undecodable
        leading byte is returned as ``'\\ufffd'``, and an empty scan code as
        ``'\\x00'``.
        """
        return self.decode('utf-8', errors='replace')[:1] or '\x00'


def read_scan_code(fd: int) -> ScanCode:
    """
    Read a scan code from file descriptor ``fd``, blocking until input arrives.

    :arg int fd: keyboard file descriptor, usually that of :obj:`sys.__stdin__`.
    :raises OSError: the read failed.
    :raises EOFError: end of file was reached, such as when the terminal closed.
    :rtype: ScanCode
    """
    data = os.read(fd, SCANCODE_SIZE)
    if not data:
        raise EOFError(f'end of file reading keyboard input from fd {fd}')
    return ScanCode(data)


def kbhit(fd: int, timeout: Optional[float] = None) -> bool:
    """
    Return whether input is awaiting to be read on file descriptor ``fd``.

    :arg float timeout: When ``timeout`` is 0, this call is non-blocking,
        otherwise blocking indefinitely until input is detected when None
        (default). When ``timeout`` is a positive number, returns after
        ``timeout`` seconds have elapsed (float).
    """
    with selectors.DefaultSelector() as selector:
        selector.register(fd, selectors.EVENT_READ)
        return bool(selector.select(timeout))


class KeyReadLoop(threading.Thread):
    """
    Background thread publishing scan codes read from the keyboard.

    Each :class:`ScanCode` is put on ``key_queue`` in the order read. When a
    read or the readiness check before it fails, the exception is put on
    ``error_queue`` and the thread exits. Both queues are owned by the
    caller: a bounded ``key_queue`` blocks the thread until the application
    catches up.

    :meth:`stop` ends the loop before its next read. Readiness is polled
    every ``poll_interval`` seconds to notice the request; a read already in
    progress is not interrupted. With ``poll_interval=None`` the loop waits
    for input in a blocking read without polling, and ends only on error.
    """

    def __init__(self, keyboard_fd: int, key_queue: 'queue.Queue[ScanCode]',
                 error_queue: 'queue.Queue[BaseException]',
                 poll_interval: Optional[float] = 0.1) -> None:
        super().__init__(name='termo-key-read-loop', daemon=True)
        self.keyboard_fd = keyboard_fd
        self.key_queue = key_queue
        self.error_queue = error_queue
        self.poll_interval = poll_interval
        self._stop_requested = threading.Event()

    def stop(self) -> None:
        """Request the loop to end before its next read."""
        self._stop_requested.set()

    @property
    def stop_requested(self) -> bool:
        """Whether :meth:`stop` has been called."""
        return self._stop_requested.is_set()

    def run(self) -> None:
        while not self._stop_requested.is_set():
            try:
                if (self.poll_interval is not None
                        and not kbhit(self.keyboard_fd, self.poll_interval)):
                    continue
                scancode = read_scan_code(self.keyboard_fd)
            except Exception as err:  # pylint: disable=broad-except
                self.error_queue.put(err)
                return
            self.key_queue.put(scancode)


def start_key_read_loop(keyboard_fd: int, key_queue: 'queue.Queue[ScanCode]',
                        error_queue: 'queue.Queue[BaseException]',
                        poll_interval: Optional[float] = 0.1) -> KeyReadLoop:
    """Start and return a :class:`KeyReadLoop` reading from ``keyboard_fd``."""
    loop = KeyReadLoop(keyboard_fd, key_queue, error_queue, poll_interval=poll_interval)
    loop.start()
    return loop
