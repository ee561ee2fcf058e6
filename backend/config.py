"""
Session configuration for the Snake game.

Values come from (highest priority first):
1. Command line flags (see main.py)
2. SNAKE_* environment variables, optionally from a .env file
3. The defaults in domain.constants
"""

import os
import logging
from dataclasses import dataclass, fields, replace
from typing import Optional

from dotenv import load_dotenv

from domain.constants import (
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_TICK_INTERVAL_MS,
    DEFAULT_INITIAL_SCORE,
)

logger = logging.getLogger(__name__)

# GameConfig field -> environment variable
ENV_VARS = {
    'width': 'SNAKE_WIDTH',
    'height': 'SNAKE_HEIGHT',
    'tick_interval_ms': 'SNAKE_TICK_INTERVAL_MS',
    'initial_score': 'SNAKE_INITIAL_SCORE',
    'seed': 'SNAKE_SEED',
    'max_ticks': 'SNAKE_MAX_TICKS',
}

MIN_BOARD_SIZE = 3


def _sanitize_env_value(value: Optional[str]) -> Optional[str]:
    """
    Clean up env-provided strings that may include surrounding quotes or whitespace,
    e.g. SNAKE_WIDTH="40" exported from a shell script.
    """
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and (
        (cleaned[0] == '"' and cleaned[-1] == '"') or (cleaned[0] == "'" and cleaned[-1] == "'")
    ):
        cleaned = cleaned[1:-1].strip()
    return cleaned or None


def _int_from_env(name: str) -> Optional[int]:
    raw = _sanitize_env_value(os.getenv(name))
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class GameConfig:
    """
    Fixed parameters for one game session.

    Attributes:
        width: grid columns, border ring included
        height: grid rows, border ring included
        tick_interval_ms: delay between updates
        initial_score: starting score
        seed: optional seed for food placement
        max_ticks: optional cap on the number of ticks to play
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    initial_score: int = DEFAULT_INITIAL_SCORE
    seed: Optional[int] = None
    max_ticks: Optional[int] = None

    @property
    def tick_interval(self) -> float:
        """Tick delay in seconds."""
        return self.tick_interval_ms / 1000.0

    def validate(self) -> "GameConfig":
        if self.width < MIN_BOARD_SIZE or self.height < MIN_BOARD_SIZE:
            raise ValueError(
                f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}, "
                f"got {self.width}x{self.height}."
            )
        if self.tick_interval_ms < 0:
            raise ValueError(f"tick_interval_ms must not be negative, got {self.tick_interval_ms}.")
        if self.max_ticks is not None and self.max_ticks <= 0:
            raise ValueError(f"max_ticks must be positive, got {self.max_ticks}.")
        return self

    def with_overrides(self, **overrides) -> "GameConfig":
        """Return a copy with every non-None override applied."""
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if k in known and v is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "GameConfig":
        """
        Build a config from SNAKE_* environment variables.

        A .env file is loaded first (existing environment variables win).
        Unset variables fall back to the defaults.
        """
        load_dotenv(dotenv_path)

        values = {}
        for field_name, env_name in ENV_VARS.items():
            value = _int_from_env(env_name)
            if value is not None:
                values[field_name] = value

        if values:
            logger.debug(f"Config overrides from environment: {values}")

        return cls(**values).validate()
