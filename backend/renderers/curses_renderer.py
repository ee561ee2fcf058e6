"""
Curses renderer - draws the board straight into the terminal.
"""

import curses
import logging
from typing import Optional, Sequence, Tuple

from .base import Renderer

logger = logging.getLogger(__name__)

CELL = '#'

# Color pair ids
BORDER_PAIR = 1
SNAKE_PAIR = 2
HEAD_PAIR = 3
FOOD_PAIR = 4


class CursesRenderer(Renderer):
    """
    Draws onto a curses window (usually the stdscr from curses.wrapper).

    Border is white, food cyan, body green and the head red when the
    terminal supports colors; otherwise the head is drawn in bold.
    """

    def __init__(self, stdscr, width: Optional[int] = None, height: Optional[int] = None):
        self.stdscr = stdscr
        self.use_colors = False
        self.rows, self.cols = stdscr.getmaxyx()

        # The board plus one spare column must fit in the window
        if width is not None and height is not None:
            if self.rows < height or self.cols < width + 1:
                raise ValueError(
                    f"Terminal is {self.cols}x{self.rows} but the board needs "
                    f"{width + 1}x{height}. Enlarge the window or pass a smaller --width/--height."
                )

        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")

        if curses.has_colors():
            curses.start_color()
            curses.init_pair(BORDER_PAIR, curses.COLOR_WHITE, curses.COLOR_BLACK)
            curses.init_pair(SNAKE_PAIR, curses.COLOR_GREEN, curses.COLOR_BLACK)
            curses.init_pair(HEAD_PAIR, curses.COLOR_RED, curses.COLOR_BLACK)
            curses.init_pair(FOOD_PAIR, curses.COLOR_CYAN, curses.COLOR_BLACK)
            self.use_colors = True

    def _attr(self, pair: int) -> int:
        if self.use_colors:
            return curses.color_pair(pair)
        return curses.A_BOLD if pair == HEAD_PAIR else curses.A_NORMAL

    def _put(self, x: int, y: int, text: str, attr: int = 0):
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # addstr raises after writing the bottom-right cell of a window
            if y != self.rows - 1 or x + len(text) < self.cols:
                raise

    def clear(self):
        self.stdscr.erase()

    def draw_borders(self, width: int, height: int):
        attr = self._attr(BORDER_PAIR)
        for x in range(width):
            self._put(x, 0, CELL, attr)
            self._put(x, height - 1, CELL, attr)
        for y in range(height):
            self._put(0, y, CELL, attr)
            self._put(width - 1, y, CELL, attr)

    def draw_snake(self, body: Sequence[Tuple[int, int]], head: Tuple[int, int]):
        attr = self._attr(SNAKE_PAIR)
        for x, y in body:
            self._put(x, y, CELL, attr)
        self._put(head[0], head[1], CELL, self._attr(HEAD_PAIR))

    def draw_food(self, position: Tuple[int, int]):
        self._put(position[0], position[1], CELL, self._attr(FOOD_PAIR))

    def present(self):
        self.stdscr.refresh()

    def show_game_over(self, score: int, width: int, height: int):
        x = width // 5
        message = f"Game Over. Score: {score}"
        self._put(x, height // 2, message[:max(0, self.cols - x)])
        self.stdscr.refresh()
