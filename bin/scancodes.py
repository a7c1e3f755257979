#!/usr/bin/env python
"""
Displays scan codes received by the background key read loop.

Mouse reporting is enabled, press 'q' to quit.
"""
# std imports
import queue

# local
import termo

HISTORY = 10


def describe(scancode):
    """Return a one-line description of ``scancode``."""
    if scancode.mouse_coords is not None:
        kind = ('down' if scancode.is_mouse_down_event else
                'up' if scancode.is_mouse_up_event else
                'move' if scancode.is_mouse_move_event else 'other')
        return f'mouse {kind} at {scancode.mouse_coords}'
    if scancode.is_escape_code:
        return f'escape code {chr(scancode.escape_code)!r}'
    return f'key {scancode.rune!r}'


def main():
    """Program entry point."""
    key_queue, error_queue = queue.Queue(maxsize=64), queue.Queue()
    with termo.init() as term:
        term.enable_mouse_events()
        width, height = term.size()
        fb = termo.Framebuffer(width, height)
        loop = term.start_key_read_loop(key_queue, error_queue)
        history = []
        try:
            while error_queue.empty():
                try:
                    scancode = key_queue.get(timeout=0.5)
                except queue.Empty:
                    continue
                if not scancode.is_escape_code and scancode.rune == 'q':
                    break
                history = (history + [f'{scancode!r:<36} {describe(scancode)}'])[-HISTORY:]
                fb.clear()
                fb.attrib_text(0, 0, termo.BOLD_WHITE_ON_BLACK, "Press 'q' to quit")
                fb.set_text(0, 2, '\n'.join(history))
                fb.flush(term)
        finally:
            loop.stop()


if __name__ == '__main__':
    exit(main())
