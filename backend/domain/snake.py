"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Optional, Union

from .position import Position, move


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end.
            The head is always the most recently added segment.
        grow_amount: pending growth, consumed one segment per move
        alive: whether this snake is still alive
        death_reason: 'wall' or 'self'
        death_tick: The tick number when the snake died
    """

    def __init__(self, start: Union[Position, Iterable[Position]]):
        if isinstance(start, tuple) and len(start) == 2 and isinstance(start[0], int):
            segments = [start]
        else:
            segments = list(start)
        if not segments:
            raise ValueError("A snake needs at least one segment.")

        self.positions = deque(Position(*segment) for segment in segments)
        self.grow_amount = 0
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def body(self) -> List[Position]:
        return list(self.positions)

    def __len__(self):
        return len(self.positions)

    def move(self, direction: str) -> Position:
        """
        Advance the snake one cell in `direction` and return the new head.

        The new head is added before the tail is considered, so a pending
        grow keeps the tail in place and the snake ends up one segment longer.
        """
        new_head = move(self.head, direction)
        self.positions.appendleft(new_head)

        if self.grow_amount > 0:
            self.grow_amount -= 1
        else:
            self.positions.pop()

        return new_head

    def grow(self):
        """Queue one segment of growth; it shows up on the next move."""
        self.grow_amount += 1

    def has_collision(self) -> bool:
        """True when the head shares a cell with any other segment."""
        head = self.head
        return any(segment == head for segment in list(self.positions)[1:])

    def is_opposite_direction(self, direction: str) -> bool:
        """
        True when moving the head in `direction` lands on the segment right
        behind it, i.e. the move would be a 180 degree reversal.
        """
        if len(self.positions) < 2:
            return False
        return move(self.head, direction) == self.positions[1]

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}, grow_amount={self.grow_amount}>"
