"""
Base renderer interface for the game engine.
"""

from typing import Sequence, Tuple


class Renderer:
    """
    Base class/interface for drawing the board.

    Every call is side-effect only. Per tick the loop calls clear(),
    draw_borders(), draw_food(), draw_snake() and finally present().
    """

    def clear(self):
        raise NotImplementedError

    def draw_borders(self, width: int, height: int):
        raise NotImplementedError

    def draw_snake(self, body: Sequence[Tuple[int, int]], head: Tuple[int, int]):
        """
        Draw every body segment, then the head in a distinct style.

        Args:
            body: all segments, head included
            head: the head segment
        """
        raise NotImplementedError

    def draw_food(self, position: Tuple[int, int]):
        raise NotImplementedError

    def show_game_over(self, score: int, width: int, height: int):
        raise NotImplementedError

    def present(self):
        """Flush the finished frame to the display. Optional."""
        pass
