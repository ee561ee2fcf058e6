"""
Food entity - the single item the snake is chasing.
"""

import random
from typing import Optional

from .position import Position


class Food:
    """
    A single piece of food placed strictly inside the border ring.

    The snake's body is not excluded when picking a cell, so food can
    appear underneath the snake.
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.position: Position = Position(1, 1)
        self.respawn(width, height)

    def respawn(self, width: int, height: int) -> Position:
        """Move the food to a random cell with 1 <= x <= width-2 and 1 <= y <= height-2."""
        if width < 3 or height < 3:
            raise ValueError(f"Board {width}x{height} has no cells inside the border.")

        self.position = Position(
            self.rng.randint(1, width - 2),
            self.rng.randint(1, height - 2),
        )
        return self.position

    def __repr__(self):
        return f"<Food position={self.position}>"
