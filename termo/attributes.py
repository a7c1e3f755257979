"""Sub-module providing cell attributes, colors, and predefined cell states."""
# std imports
import enum
import collections


class Attribute(enum.IntEnum):
    """
    Display attribute of a single cell.

    Values are the SGR parameter emitted for each attribute. A cell carries
    exactly one attribute, these are not bit flags.
    """

    NONE = 0
    BOLD = 1
    DIM = 2
    UNDERLINE = 4
    BLINK = 5
    REVERSE = 7
    HIDDEN = 8


class Color(enum.IntEnum):
    """
    Foreground color of a cell, valued as its SGR foreground parameter.

    The same values are used for background colors, see :func:`background`.
    """

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    DEFAULT = 39

    def light(self) -> int:
        """
        Return the high-intensity variant of this color.

        :rtype: int
        :returns: SGR foreground parameter of the bright color, ``90..97``
            for the standard colors. No bounds checking is performed.
        """
        return int(self) + 60


def background(color: int) -> int:
    """Return the SGR background parameter for foreground ``color``."""
    return int(color) + 10


class CellState(collections.namedtuple('CellState', ('attrib', 'fg', 'bg'))):
    """
    Attribute and colors applied to a cell.

    .. py:attribute:: attrib

        :class:`Attribute` value

    .. py:attribute:: fg

        foreground :class:`Color` value, or its :meth:`Color.light` variant

    .. py:attribute:: bg

        background color, given as a *foreground* color value
    """
    __slots__ = ()


#: Default attribute with the terminal's default colors.
STATE_DEFAULT = CellState(Attribute.NONE, Color.DEFAULT, Color.DEFAULT)

#: Bold, bright white text on black.
BOLD_WHITE_ON_BLACK = CellState(Attribute.BOLD, Color.GRAY.light(), Color.BLACK)

#: Bold black text on bright white.
BOLD_BLACK_ON_WHITE = CellState(Attribute.BOLD, Color.BLACK, Color.GRAY.light())
