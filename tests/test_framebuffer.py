# -*- coding: utf-8 -*-
"""Tests for Framebuffer drawing primitives."""
# 3rd party
import pytest

# local
from termo import (BOLD_BLACK_ON_WHITE,
                   BOLD_WHITE_ON_BLACK,
                   STATE_DEFAULT,
                   Cell,
                   Color,
                   Attribute,
                   CellState,
                   Framebuffer)

RED_ON_BLUE = CellState(Attribute.BOLD, Color.RED, Color.BLUE)
BLANK = (' ', STATE_DEFAULT)


def snapshot(fb):
    """Return every cell of ``fb``, as a list of ``(glyph, state)``."""
    return [fb.get(x, y) for y in range(fb.height) for x in range(fb.width)]


def test_new_framebuffer_is_blank(fb_size):
    """Every cell of a new framebuffer is a blank of default state."""
    fb = Framebuffer(*fb_size)
    assert (fb.width, fb.height) == fb_size
    assert all(cell == BLANK for cell in snapshot(fb))
    assert len(list(fb.cells())) == fb_size[0] * fb_size[1]
    assert all(cell == Cell(STATE_DEFAULT, ' ') for cell in fb.cells())


def test_empty_framebuffer():
    """Zero-sized framebuffers are allowed."""
    fb = Framebuffer(0, 0)
    assert list(fb.cells()) == []
    assert fb.get(0, 0) == BLANK
    fb.set(0, 0, RED_ON_BLUE, 'X')
    fb.clear()
    assert list(fb.cells()) == []


@pytest.mark.parametrize('width,height', [(-1, 1), (1, -1), (-5, -5)])
def test_negative_size(width, height):
    """Negative dimensions raise ValueError."""
    with pytest.raises(ValueError):
        Framebuffer(width, height)


def test_size_is_read_only():
    """width and height cannot be assigned."""
    fb = Framebuffer(2, 2)
    with pytest.raises(AttributeError):
        fb.width = 3
    with pytest.raises(AttributeError):
        fb.height = 3
    assert repr(fb) == 'Framebuffer(2, 2)'


@pytest.mark.parametrize('x,y', [(-1, 0), (0, -1), (3, 0), (0, 2), (100, 100), (-7, -7)])
def test_get_out_of_bounds(x, y):
    """Reading outside of the grid returns a blank of default state."""
    fb = Framebuffer(3, 2)
    fb.set_rect(0, 0, 3, 2, RED_ON_BLUE, '#')
    assert fb.get(x, y) == BLANK


def test_set_then_get():
    """A cell returns what was last set."""
    fb = Framebuffer(3, 2)
    fb.set(2, 1, RED_ON_BLUE, 'A')
    assert fb.get(2, 1) == ('A', RED_ON_BLUE)
    fb.set(2, 1, BOLD_WHITE_ON_BLACK, 'B')
    assert fb.get(2, 1) == ('B', BOLD_WHITE_ON_BLACK)
    assert fb.row_text(1) == '  B'


def test_set_out_of_bounds_is_ignored():
    """Writing outside of the grid changes nothing."""
    fb = Framebuffer(3, 2)
    before = snapshot(fb)
    fb.set(-1, 0, RED_ON_BLUE, 'X')
    fb.set(3, 0, RED_ON_BLUE, 'X')
    fb.set(0, 2, RED_ON_BLUE, 'X')
    fb.set_rune(0, -1, 'X')
    assert fb.get(0, 0) == BLANK
    assert snapshot(fb) == before


def test_set_rune_keeps_state():
    """set_rune replaces the glyph only."""
    fb = Framebuffer(2, 2)
    fb.set(1, 1, RED_ON_BLUE, 'r')
    fb.set_rune(1, 1, 'R')
    assert fb.get(1, 1) == ('R', RED_ON_BLUE)


def test_set_rect_clips():
    """set_rect tolerates rectangles extending past every edge."""
    fb = Framebuffer(4, 3)
    fb.set_rect(-2, -2, 4, 4, RED_ON_BLUE, '#')
    assert fb.row_text(0) == '##  '
    assert fb.row_text(1) == '##  '
    assert fb.row_text(2) == '    '
    assert fb.get(1, 1) == ('#', RED_ON_BLUE)
    assert fb.get(2, 1) == BLANK

    fb.set_rect(3, 2, 10, 10, BOLD_BLACK_ON_WHITE, '%')
    assert fb.get(3, 2) == ('%', BOLD_BLACK_ON_WHITE)
    assert fb.row_text(2) == '   %'


def test_set_rect_touches_only_rectangle():
    """Cells outside of the rectangle are unchanged."""
    fb = Framebuffer(5, 5)
    fb.set_rect(1, 1, 3, 2, RED_ON_BLUE, '#')
    for y in range(5):
        for x in range(5):
            inside = 1 <= x < 4 and 1 <= y < 3
            assert fb.get(x, y) == (('#', RED_ON_BLUE) if inside else BLANK)


@pytest.mark.parametrize('w,h', [(0, 3), (3, 0), (-2, 2)])
def test_set_rect_empty(w, h):
    """Empty rectangles draw nothing."""
    fb = Framebuffer(3, 3)
    fb.set_rect(0, 0, w, h, RED_ON_BLUE, '#')
    assert all(cell == BLANK for cell in snapshot(fb))


def test_attrib_rect_keeps_glyphs():
    """attrib_rect changes state only."""
    fb = Framebuffer(3, 2)
    fb.set_text(0, 0, 'abc\ndef')
    fb.attrib_rect(1, 0, 5, 1, RED_ON_BLUE)
    assert fb.get(0, 0) == ('a', STATE_DEFAULT)
    assert fb.get(1, 0) == ('b', RED_ON_BLUE)
    assert fb.get(2, 0) == ('c', RED_ON_BLUE)
    assert fb.get(1, 1) == ('e', STATE_DEFAULT)


def test_set_text_lines():
    """Newline continues on the next row at the starting column."""
    fb = Framebuffer(4, 2)
    fb.set_text(0, 0, 'ab\ncd')
    assert fb.row_text(0) == 'ab  '
    assert fb.row_text(1) == 'cd  '
    assert all(state == STATE_DEFAULT for _, state in snapshot(fb))


def test_set_text_at_offset():
    """Lines after a newline restart at x0, not column zero."""
    fb = Framebuffer(6, 3)
    fb.set_text(2, 1, 'xy\nz')
    assert fb.row_text(0) == '      '
    assert fb.row_text(1) == '  xy  '
    assert fb.row_text(2) == '  z   '


def test_set_text_clips():
    """Text is not wrapped, characters past the edges are dropped."""
    fb = Framebuffer(3, 1)
    fb.set_text(-1, 0, 'abcdef\nghi')
    assert fb.row_text(0) == 'bcd'


def test_set_text_keeps_state():
    """set_text leaves the state of written cells unchanged."""
    fb = Framebuffer(3, 1)
    fb.attrib_rect(0, 0, 3, 1, RED_ON_BLUE)
    fb.set_text(0, 0, 'hey')
    assert snapshot(fb) == [('h', RED_ON_BLUE), ('e', RED_ON_BLUE), ('y', RED_ON_BLUE)]


def test_set_text_no_tab_handling():
    """Tabs occupy a single cell, like any other character."""
    fb = Framebuffer(3, 1)
    fb.set_text(0, 0, 'a\tb')
    assert fb.row_text(0) == 'a\tb'


def test_attrib_text_writes_state():
    """attrib_text writes its state to every touched cell."""
    fb = Framebuffer(4, 2)
    fb.attrib_text(1, 0, BOLD_WHITE_ON_BLACK, 'ab\nc')
    assert fb.get(0, 0) == BLANK
    assert fb.get(1, 0) == ('a', BOLD_WHITE_ON_BLACK)
    assert fb.get(2, 0) == ('b', BOLD_WHITE_ON_BLACK)
    assert fb.get(1, 1) == ('c', BOLD_WHITE_ON_BLACK)
    assert fb.get(2, 1) == BLANK


def test_center_text():
    """Midpoint of the line lands on the given column."""
    fb = Framebuffer(10, 2)
    fb.center_text(5, 0, 'hi')
    assert fb.get(4, 0)[0] == 'h'
    assert fb.get(5, 0)[0] == 'i'
    assert fb.row_text(0) == '    hi    '


def test_center_text_lines():
    """Each line is centered on its own, on successive rows."""
    fb = Framebuffer(7, 3)
    fb.attrib_rect(0, 0, 7, 3, RED_ON_BLUE)
    fb.center_text(3, 0, 'abc\n\nhello')
    assert fb.row_text(0) == '  abc  '
    assert fb.row_text(1) == '       '
    assert fb.row_text(2) == ' hello '
    assert all(state == RED_ON_BLUE for _, state in snapshot(fb))


def test_center_text_clips():
    """Centered text wider than the grid is clipped on both sides."""
    fb = Framebuffer(3, 1)
    fb.center_text(1, 0, 'abcdefg')
    assert fb.row_text(0) == 'cde'


def test_ascii_rect_single():
    """Single-line border at the origin, inside untouched."""
    fb = Framebuffer(5, 5)
    fb.ascii_rect(0, 0, 5, 5, False, False)
    assert [fb.row_text(y) for y in range(5)] == [
        '┌───┐',
        '│   │',
        '│   │',
        '│   │',
        '└───┘',
    ]


def test_ascii_rect_double_at_offset():
    """Corners of a rectangle away from the origin are placed on its edges."""
    fb = Framebuffer(6, 5)
    fb.set_rect(0, 0, 6, 5, STATE_DEFAULT, '.')
    fb.ascii_rect(1, 1, 4, 3, double_width=True)
    assert [fb.row_text(y) for y in range(5)] == [
        '......',
        '.╔══╗.',
        '.║..║.',
        '.╚══╝.',
        '......',
    ]


def test_ascii_rect_clear_inside():
    """clear_inside fills the inner part with spaces."""
    fb = Framebuffer(4, 4)
    fb.set_rect(0, 0, 4, 4, STATE_DEFAULT, '.')
    fb.ascii_rect(0, 0, 4, 4, clear_inside=True)
    assert [fb.row_text(y) for y in range(4)] == [
        '┌──┐',
        '│  │',
        '│  │',
        '└──┘',
    ]


def test_ascii_rect_keeps_state_and_clips():
    """Border glyphs keep cell state, and parts outside the grid are dropped."""
    fb = Framebuffer(3, 3)
    fb.attrib_rect(0, 0, 3, 3, RED_ON_BLUE)
    fb.ascii_rect(1, 1, 5, 5)
    assert fb.row_text(0) == '   '
    assert fb.row_text(1) == ' ┌─'
    assert fb.row_text(2) == ' │ '
    assert all(state == RED_ON_BLUE for _, state in snapshot(fb))


def test_ascii_rect_single_column():
    """Corners take precedence over edges in degenerate rectangles."""
    fb = Framebuffer(1, 3)
    fb.ascii_rect(0, 0, 1, 3)
    assert [fb.row_text(y) for y in range(3)] == ['┌', '│', '└']


def test_clear_is_idempotent():
    """Clear restores blanks, twice gives the same grid."""
    fb = Framebuffer(4, 3)
    fb.attrib_text(0, 0, RED_ON_BLUE, 'abcd\nefgh')
    fb.clear()
    once = snapshot(fb)
    fb.clear()
    assert snapshot(fb) == once
    assert all(cell == BLANK for cell in once)


def test_row_text_out_of_bounds():
    """row_text of a row outside the grid is empty."""
    fb = Framebuffer(2, 2)
    assert fb.row_text(-1) == ''
    assert fb.row_text(2) == ''


@pytest.mark.parametrize('glyph', ['', 'ab', '──', 65, None])
def test_glyph_must_be_single_character(glyph):
    """Glyphs other than a single character are refused where they are stored."""
    fb = Framebuffer(2, 2)
    with pytest.raises(ValueError):
        fb.set(0, 0, RED_ON_BLUE, glyph)
    with pytest.raises(ValueError):
        fb.set_rune(0, 0, glyph)
    with pytest.raises(ValueError):
        fb.set_rect(0, 0, 2, 2, RED_ON_BLUE, glyph)
    # outside of the grid too, so that mistakes are not hidden by clipping
    with pytest.raises(ValueError):
        fb.set(-1, -1, RED_ON_BLUE, glyph)
    assert all(cell == BLANK for cell in snapshot(fb))
    assert fb.render().count('\x1b[0;39;49m \x1b[0m') == 4
