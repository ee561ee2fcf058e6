"""
Base input interface for the game engine.
"""

from typing import Optional


class InputSource:
    """
    Base class/interface for direction input.

    The game loop polls the source once per tick. Polling must never block:
    when nothing new has been pressed the source returns None right away.
    """

    def get_direction(self) -> Optional[str]:
        """
        Return the newest direction, if any.

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None when there is
            no new directional input (unrecognized keys count as none)
        """
        raise NotImplementedError
