"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: number of completed ticks
        snake_positions: list of (x, y), head first
        food: (x, y) of the food
        direction: current direction of travel
        score: current score
        status: 'running' or 'game_over'
        width, height: board dimensions
    """

    def __init__(
        self,
        tick: int,
        snake_positions: List[Tuple[int, int]],
        food: Tuple[int, int],
        direction: str,
        score: int,
        status: str,
        width: int,
        height: int,
    ):
        self.tick = tick
        self.snake_positions = snake_positions
        self.food = food
        self.direction = direction
        self.score = score
        self.status = status
        self.width = width
        self.height = height

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, direction={self.direction}, "
            f"score={self.score}, status={self.status}, food={self.food}>"
        )
