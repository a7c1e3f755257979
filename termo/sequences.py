"""
Escape sequences written by termo.

Control sequences documentation: https://invisible-island.net/xterm/ctlseqs/ctlseqs.html
"""
# std imports
from typing import List, Tuple, Union

# local
from .dec_modes import DecPrivateMode
from .attributes import background

#: Move cursor to the upper-left corner.
HOME = '\x1b[0;0H'

#: Reset all attributes and colors.
SGR_RESET = '\x1b[0m'


def move_yx(y: int, x: int) -> str:
    """
    Return sequence moving the cursor to zero-based position ``(y, x)``.

    The terminal addresses cells starting at 1, the given position is
    converted on output.
    """
    return f'\x1b[{y + 1};{x + 1}H'


def sgr(attrib: int, fg: int, bg: int) -> str:
    """
    Return SGR sequence setting attribute, foreground and background.

    :arg int attrib: :class:`~.Attribute` value.
    :arg int fg: foreground :class:`~.Color` value.
    :arg int bg: background color, given as a *foreground* color value.
    """
    return f'\x1b[{int(attrib)};{int(fg)};{background(bg)}m'


def _mode_numbers(modes: Tuple[Union[int, DecPrivateMode], ...]) -> List[int]:
    mode_numbers = []
    for arg_pos, mode in enumerate(modes):
        if isinstance(mode, DecPrivateMode):
            mode_num = mode.value
        elif isinstance(mode, int):
            mode_num = int(mode)
        else:
            raise TypeError("Invalid mode argument number {0}, got {1!r}, "
                            "DecPrivateMode or int expected".format(arg_pos, mode))
        mode_numbers.append(mode_num)
    return mode_numbers


def dec_set(*modes: Union[int, DecPrivateMode]) -> str:
    """Return DECSET sequence enabling one or more DEC Private Modes."""
    return '\x1b[?{0}h'.format(';'.join(str(val) for val in _mode_numbers(modes)))


def dec_reset(*modes: Union[int, DecPrivateMode]) -> str:
    """Return DECRST sequence disabling one or more DEC Private Modes."""
    return '\x1b[?{0}l'.format(';'.join(str(val) for val in _mode_numbers(modes)))
