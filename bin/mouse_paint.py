#!/usr/bin/env python
"""Paint on the terminal by dragging the mouse, press 'q' to quit."""
# local
import termo
from termo import Color, Attribute, CellState

BRUSH = CellState(Attribute.NONE, Color.YELLOW.light(), Color.BLUE)


def main():
    """Program entry point."""
    with termo.init() as term:
        term.enable_mouse_events()
        width, height = term.size()
        fb = termo.Framebuffer(width, height)
        fb.attrib_rect(0, 0, width, 1, termo.BOLD_BLACK_ON_WHITE)
        fb.set_text(1, 0, "Press 'q' to quit!")
        fb.flush(term)

        button_held = False
        while True:
            scancode = term.read_scan_code()
            if not scancode.is_escape_code and scancode.rune == 'q':
                break
            if scancode.is_mouse_down_event:
                button_held = True
            elif scancode.is_mouse_up_event:
                button_held = False
            coords = scancode.mouse_coords
            if coords is None:
                continue

            # display mouse data in the header row, paint while button is held
            x, y = coords
            fb.set_text(width - 12, 0, f'{x:>4},{y:<4}  ')
            if button_held and y > 0:
                fb.set(x, y, BRUSH, '█')
            fb.flush(term)


if __name__ == '__main__':
    exit(main())
