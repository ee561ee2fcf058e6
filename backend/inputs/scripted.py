"""
Scripted input - replays a fixed list of directions, one per poll.
"""

from collections import deque
from typing import Iterable, Optional

from domain.constants import VALID_MOVES
from .base import InputSource


class ScriptedInput(InputSource):
    """
    Feeds a pre-set sequence of directions to the game loop.

    Each poll consumes one entry; None entries mean "no key this tick".
    Once the script runs out every poll returns None.
    """

    def __init__(self, moves: Iterable[Optional[str]] = ()):
        self.pending = deque()
        for move in moves:
            if move is not None:
                move = move.upper()
                if move not in VALID_MOVES:
                    raise ValueError(f"Unknown direction in script: {move!r}")
            self.pending.append(move)

    def get_direction(self) -> Optional[str]:
        if not self.pending:
            return None
        return self.pending.popleft()
