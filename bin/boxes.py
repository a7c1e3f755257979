#!/usr/bin/env python
"""Draws nested boxes with centered captions, until any key is pressed."""
# local
import termo
from termo import Color, Attribute, CellState


def main():
    """Program entry point."""
    with termo.init() as term:
        width, height = term.size()
        fb = termo.Framebuffer(width, height)
        colors = [color for color in termo.Color if color != Color.DEFAULT]

        depth = 0
        x0, y0, w, h = 0, 0, width, height
        while w > 2 and h > 2:
            color = colors[depth % len(colors)]
            fb.attrib_rect(x0, y0, w, h, CellState(Attribute.NONE, color.light(), Color.DEFAULT))
            fb.ascii_rect(x0, y0, w, h, double_width=depth % 2 == 0, clear_inside=True)
            depth += 1
            x0, y0, w, h = x0 + 2, y0 + 1, w - 4, h - 2

        fb.attrib_text(2, 0, termo.BOLD_WHITE_ON_BLACK, f' {width}x{height} ')
        fb.center_text(width // 2, height // 2, f'{depth} boxes\npress any key')
        term.set_cursor(width - 1, height - 1)
        fb.flush(term)
        term.read_scan_code()


if __name__ == '__main__':
    exit(main())
