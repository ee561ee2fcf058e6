"""
Renderers for the Snake game.
"""

from .base import Renderer
from .text_renderer import TextRenderer

__all__ = [
    'Renderer',
    'TextRenderer',
]
