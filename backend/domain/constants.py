"""
Game constants for the terminal Snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE_MOVES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# (dx, dy) per direction; y grows downwards like terminal rows
MOVE_OFFSETS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Session defaults
DEFAULT_WIDTH = 32
DEFAULT_HEIGHT = 16
DEFAULT_TICK_INTERVAL_MS = 100
DEFAULT_INITIAL_SCORE = 5
START_DIRECTION = RIGHT

# Game status
RUNNING = "running"
GAME_OVER = "game_over"
