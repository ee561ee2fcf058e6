"""
Input sources for the Snake game.

The game loop only talks to the InputSource interface; the curses keyboard
reader and the scripted source are the two implementations shipped here.
"""

from .base import InputSource
from .scripted import ScriptedInput

__all__ = [
    'InputSource',
    'ScriptedInput',
]
