"""
Plain-text renderer - prints each frame as lines of characters.
"""

import sys
from typing import List, Optional, Sequence, TextIO, Tuple

from .base import Renderer

BORDER = '#'
EMPTY = ' '
FOOD = '*'
BODY = 'o'
HEAD = '@'

# ANSI "cursor home + clear screen"
CLEAR_SCREEN = "\x1b[H\x1b[2J"


class TextRenderer(Renderer):
    """
    Composes a frame in a character grid and writes it out on present().

    Useful where curses is unavailable (pipes, CI logs) and in tests, where
    `stream` can be an io.StringIO.
    """

    def __init__(self, stream: Optional[TextIO] = None, ansi: bool = False):
        self.stream = stream or sys.stdout
        self.ansi = ansi
        self.grid: List[List[str]] = []

    def clear(self):
        self.grid = []

    def _put(self, x: int, y: int, char: str):
        if 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y]):
            self.grid[y][x] = char

    def draw_borders(self, width: int, height: int):
        self.grid = [[EMPTY for _ in range(width)] for _ in range(height)]
        for x in range(width):
            self._put(x, 0, BORDER)
            self._put(x, height - 1, BORDER)
        for y in range(height):
            self._put(0, y, BORDER)
            self._put(width - 1, y, BORDER)

    def draw_snake(self, body: Sequence[Tuple[int, int]], head: Tuple[int, int]):
        for x, y in body:
            self._put(x, y, BODY)
        self._put(head[0], head[1], HEAD)

    def draw_food(self, position: Tuple[int, int]):
        self._put(position[0], position[1], FOOD)

    def render_frame(self) -> str:
        return "\n".join(''.join(row) for row in self.grid)

    def present(self):
        if self.ansi:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(self.render_frame() + "\n\n")
        self.stream.flush()

    def show_game_over(self, score: int, width: int, height: int):
        self.stream.write(f"Game Over. Score: {score}\n")
        self.stream.flush()
