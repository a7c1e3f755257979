"""Sub-module providing :class:`Framebuffer`, an in-memory grid of styled cells."""
# std imports
import collections
from typing import TYPE_CHECKING, Tuple, Iterator, Optional

# local
from .attributes import STATE_DEFAULT, CellState
from .sequences import HOME, SGR_RESET, sgr, move_yx

if TYPE_CHECKING:  # pragma: no cover
    # local
    from .terminal import Terminal

#: Border glyphs: horizontal, vertical, top-left, top-right, bottom-left, bottom-right.
SINGLE_WIDTH_CHARSET = ('─', '│', '┌', '┐', '└', '┘')
DOUBLE_WIDTH_CHARSET = ('═', '║', '╔', '╗', '╚', '╝')


class Cell(collections.namedtuple('Cell', ('state', 'glyph'))):
    """
    A single character position of a :class:`Framebuffer`.

    .. py:attribute:: state

        :class:`~.CellState` of this cell

    .. py:attribute:: glyph

        single-column character displayed in this cell
    """
    __slots__ = ()


_BLANK = Cell(STATE_DEFAULT, ' ')


def _check_glyph(glyph: str) -> None:
    if not isinstance(glyph, str) or len(glyph) != 1:
        raise ValueError(f'glyph must be a single character, got {glyph!r}')


class Framebuffer():
    """
    A grid of cells that is drawn into and then flushed to the terminal as a unit.

    Coordinates are zero-based ``(x, y)`` with ``(0, 0)`` at the upper-left.
    Drawing outside of the grid is silently ignored, cell by cell, so it is
    safe to draw with computed coordinates without clipping them first::

        fb = Framebuffer(*term.size())
        fb.ascii_rect(0, 0, fb.width, fb.height, double_width=True)
        fb.center_text(fb.width // 2, fb.height // 2, 'Hello!')
        fb.flush(term)

    The width and height never change. Every flush rewrites the whole grid.
    """

    def __init__(self, width: int, height: int) -> None:
        """
        Allocate a grid of ``width`` by ``height`` blank cells.

        :raises ValueError: ``width`` or ``height`` is negative.
        """
        if width < 0 or height < 0:
            raise ValueError(f'Invalid framebuffer size {width}x{height}')
        self._width = width
        self._height = height
        self._cells = [_BLANK] * (width * height)
        self.clear()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._width}, {self._height})'

    @property
    def width(self) -> int:
        """
        Read-only property: number of columns.

        :rtype: int
        """
        return self._width

    @property
    def height(self) -> int:
        """
        Read-only property: number of rows.

        :rtype: int
        """
        return self._height

    def _index(self, x: int, y: int) -> Optional[int]:
        if x < 0 or y < 0 or x >= self._width or y >= self._height:
            return None
        return y * self._width + x

    def get(self, x: int, y: int) -> Tuple[str, CellState]:
        """
        Return ``(glyph, state)`` of the cell at ``(x, y)``.

        Outside of the grid, a blank ``(' ', STATE_DEFAULT)`` is returned.
        """
        idx = self._index(x, y)
        cell = _BLANK if idx is None else self._cells[idx]
        return cell.glyph, cell.state

    def set(self, x: int, y: int, state: CellState, glyph: str) -> None:
        """
        Replace both glyph and state of the cell at ``(x, y)``.

        :raises ValueError: ``glyph`` is not a single character.
        """
        _check_glyph(glyph)
        idx = self._index(x, y)
        if idx is not None:
            self._cells[idx] = Cell(state, glyph)

    def set_rune(self, x: int, y: int, glyph: str) -> None:
        """Replace the glyph of the cell at ``(x, y)``, keeping its state."""
        _check_glyph(glyph)
        idx = self._index(x, y)
        if idx is not None:
            self._cells[idx] = self._cells[idx]._replace(glyph=glyph)

    def _set_state(self, x: int, y: int, state: CellState) -> None:
        idx = self._index(x, y)
        if idx is not None:
            self._cells[idx] = self._cells[idx]._replace(state=state)

    def set_rect(self, x0: int, y0: int, w: int, h: int,
                 state: CellState, glyph: str) -> None:
        """Fill the rectangle of ``w`` by ``h`` cells at ``(x0, y0)`` with glyph and state."""
        _check_glyph(glyph)
        for y in range(y0, y0 + h):
            for x in range(x0, x0 + w):
                self.set(x, y, state, glyph)

    def attrib_rect(self, x0: int, y0: int, w: int, h: int, state: CellState) -> None:
        """Set the state of a rectangle of cells, without changing their glyphs."""
        for y in range(y0, y0 + h):
            for x in range(x0, x0 + w):
                self._set_state(x, y, state)

    def ascii_rect(self, x0: int, y0: int, w: int, h: int,
                   double_width: bool = False, clear_inside: bool = False) -> None:
        """
        Draw the border of a rectangle of ``w`` by ``h`` cells at ``(x0, y0)``.

        :arg bool double_width: draw with double lines (``═``) instead of
            single lines (``─``).
        :arg bool clear_inside: fill the inner part with spaces, otherwise
            it is left untouched.

        Only glyphs are drawn, the state of each cell is kept.
        """
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        charset = DOUBLE_WIDTH_CHARSET if double_width else SINGLE_WIDTH_CHARSET
        x1, y1 = x0 + w - 1, y0 + h - 1
        for y in range(y0, y0 + h):
            for x in range(x0, x0 + w):
                if x == x0:
                    glyph = charset[2] if y == y0 else charset[4] if y == y1 else charset[1]
                elif x == x1:
                    glyph = charset[3] if y == y0 else charset[5] if y == y1 else charset[1]
                elif y in (y0, y1):
                    glyph = charset[0]
                elif clear_inside:
                    glyph = ' '
                else:
                    continue
                self.set_rune(x, y, glyph)

    def set_text(self, x0: int, y0: int, text: str) -> None:
        r"""
        Draw ``text`` from left to right and top to bottom, starting at ``(x0, y0)``.

        Each ``'\n'`` continues on the next row at column ``x0``. There is no
        wrapping, characters outside of the grid are ignored. The state of
        written cells is unchanged.
        """
        x = x0
        for glyph in text:
            if glyph == '\n':
                x = x0
                y0 += 1
                continue
            self.set_rune(x, y0, glyph)
            x += 1

    def attrib_text(self, x0: int, y0: int, state: CellState, text: str) -> None:
        """As :meth:`set_text`, also changing the state of written cells to ``state``."""
        x = x0
        for glyph in text:
            if glyph == '\n':
                x = x0
                y0 += 1
                continue
            self.set(x, y0, state, glyph)
            x += 1

    def center_text(self, x: int, y0: int, text: str) -> None:
        """
        Draw each line of ``text`` centered on column ``x``, starting at row ``y0``.

        A line of ``n`` characters starts at column ``x - n // 2``. The state
        of written cells is unchanged.
        """
        for y, line in enumerate(text.split('\n'), y0):
            start = x - len(line) // 2
            for i, glyph in enumerate(line):
                self.set_rune(start + i, y, glyph)

    def clear(self) -> None:
        """Fill the whole grid with blank spaces of default state."""
        self.set_rect(0, 0, self._width, self._height, STATE_DEFAULT, ' ')

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells, row by row."""
        return iter(self._cells)

    def row_text(self, y: int) -> str:
        """Return the glyphs of row ``y``, or ``''`` outside of the grid."""
        if y < 0 or y >= self._height:
            return ''
        start = y * self._width
        return ''.join(cell.glyph for cell in self._cells[start:start + self._width])

    def render(self, cursor: Tuple[int, int] = (0, 0)) -> str:
        """
        Return the sequence that draws this framebuffer on the terminal.

        The cursor is homed, then each cell is written wrapped in its own SGR
        sequence and reset, rows separated by ``'\\n'``. Cells of control
        characters (below 32) are not written at all. Finally, the cursor is
        moved to zero-based position ``cursor``, given as ``(x, y)``.
        """
        output = [HOME]
        for y in range(self._height):
            if y != 0:
                output.append('\n')
            row = self._cells[y * self._width:(y + 1) * self._width]
            for state, glyph in row:
                if ord(glyph) < 32:
                    continue
                output.append(sgr(*state) + glyph + SGR_RESET)
        output.append(SGR_RESET)
        x, y = cursor
        output.append(move_yx(y, x))
        return ''.join(output)

    def flush(self, term: 'Terminal') -> None:
        """
        Write the whole framebuffer to ``term``.

        The cursor ends at :attr:`Terminal.cursor`. Output written by others
        to the same stream during a flush corrupts the display.
        """
        term.write(self.render(term.cursor))
