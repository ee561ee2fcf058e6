"""
Keyboard input read through curses.
"""

import curses
from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT
from .base import InputSource

KEY_DIRECTIONS = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
}


class CursesInput(InputSource):
    """
    Reads arrow keys from a curses window without blocking.

    The window is switched to no-delay mode so getch() returns -1 straight
    away when no key is queued. Only one key is read per poll.
    """

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.stdscr.keypad(True)
        self.stdscr.nodelay(True)

    def get_direction(self) -> Optional[str]:
        key = self.stdscr.getch()
        if key == -1:
            return None
        return KEY_DIRECTIONS.get(key)
