"""
A small framebuffer for drawing text user interfaces on VT100 terminals.

Draw into a :class:`Framebuffer` of styled cells, flush it to a started
:class:`Terminal`, and read key presses and mouse reports as :class:`ScanCode`.
"""
# local
from termo.keyboard import ScanCode, KeyReadLoop
from termo.terminal import Terminal, NotATerminalError, init
from termo.dec_modes import DecPrivateMode
from termo.attributes import (BOLD_BLACK_ON_WHITE,
                              BOLD_WHITE_ON_BLACK,
                              STATE_DEFAULT,
                              Color,
                              Attribute,
                              CellState)
from termo.framebuffer import Cell, Framebuffer

__all__ = ('Terminal', 'NotATerminalError', 'init', 'ScanCode', 'KeyReadLoop',
           'DecPrivateMode', 'Color', 'Attribute', 'CellState', 'STATE_DEFAULT',
           'BOLD_WHITE_ON_BLACK', 'BOLD_BLACK_ON_WHITE', 'Cell', 'Framebuffer')
__version__ = "1.0.0"
