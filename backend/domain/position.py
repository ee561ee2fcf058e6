"""
Position value type and the movement transform.
"""

from typing import NamedTuple

from .constants import MOVE_OFFSETS, OPPOSITE_MOVES


class Position(NamedTuple):
    """A grid cell. (0, 0) is the top-left corner."""

    x: int
    y: int

    def move(self, direction: str) -> "Position":
        return move(self, direction)

    def __repr__(self):
        return f"({self.x}, {self.y})"


def move(position: Position, direction: str) -> Position:
    """Return the cell one step away from `position` in `direction`."""
    try:
        dx, dy = MOVE_OFFSETS[direction]
    except KeyError:
        raise ValueError(f"Unknown direction: {direction!r}") from None
    return Position(position[0] + dx, position[1] + dy)


def opposite(direction: str) -> str:
    try:
        return OPPOSITE_MOVES[direction]
    except KeyError:
        raise ValueError(f"Unknown direction: {direction!r}") from None
