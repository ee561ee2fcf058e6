import argparse
import json
import logging
import os
import random
import time
from typing import Callable, Optional

from config import GameConfig
from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, START_DIRECTION, RUNNING, GAME_OVER
from domain.food import Food
from domain.game_state import GameState
from domain.position import Position
from domain.snake import Snake
from inputs.base import InputSource
from renderers.base import Renderer

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - The snake and its current direction
      - The food
      - Score
      - Ticks
    """
    def __init__(
        self,
        renderer: Renderer,
        input_source: InputSource,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        sleep: Optional[Callable[[float], None]] = None
    ):
        self.config = (config or GameConfig()).validate()
        self.renderer = renderer
        self.input_source = input_source
        self.sleep = sleep or time.sleep

        self.width = self.config.width
        self.height = self.config.height
        self.direction = START_DIRECTION
        self.score = self.config.initial_score
        self.status = RUNNING
        self.tick = 0

        if rng is None:
            rng = random.Random(self.config.seed)
        self.snake = Snake(Position(self.width // 2, self.height // 2))
        self.food = Food(self.width, self.height, rng=rng)

        logger.info(
            f"New game on a {self.width}x{self.height} board, snake at {self.snake.head}, "
            f"food at {self.food.position}, seed={self.config.seed}"
        )

    @property
    def game_over(self) -> bool:
        return self.status == GAME_OVER

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick,
            snake_positions=self.snake.body,
            food=self.food.position,
            direction=self.direction,
            score=self.score,
            status=self.status,
            width=self.width,
            height=self.height
        )

    def handle_input(self):
        """Adopt the polled direction unless it would reverse the snake onto itself."""
        direction = self.input_source.get_direction()
        if direction is None or direction not in VALID_MOVES:
            return

        if self.snake.is_opposite_direction(direction):
            logger.debug(f"Tick {self.tick}: ignoring reversal {self.direction} -> {direction}")
            return

        if direction != self.direction:
            logger.debug(f"Tick {self.tick}: direction {self.direction} -> {direction}")
        self.direction = direction

    def _hits_border(self, position: Position) -> bool:
        x, y = position
        return x <= 0 or x >= self.width - 1 or y <= 0 or y >= self.height - 1

    def update(self):
        """
        Advance the snake, then:
          1) End the game on a border or self collision
          2) Otherwise eat the food if the head landed on it
        """
        head = self.snake.move(self.direction)

        if self._hits_border(head):
            self.end_game("wall")
            return
        if self.snake.has_collision():
            self.end_game("self")
            return

        if head == self.food.position:
            self.score += 1
            self.snake.grow()
            new_food = self.food.respawn(self.width, self.height)
            logger.info(f"Tick {self.tick}: ate food at {head}, score {self.score}, new food at {new_food}")

    def render(self):
        self.renderer.clear()
        self.renderer.draw_borders(self.width, self.height)
        self.renderer.draw_food(self.food.position)
        self.renderer.draw_snake(self.snake.body, self.snake.head)
        self.renderer.present()

    def run_tick(self):
        """
        Execute one tick:
          1) If game is over, do nothing
          2) Read at most one direction from the input source
          3) Move, check collisions, handle food
          4) Render the frame (including the fatal one)
        """
        if self.game_over:
            logger.warning("Game is already over. No more ticks.")
            return

        self.handle_input()
        self.update()
        self.render()
        self.tick += 1

    def end_game(self, reason: str):
        if self.game_over:
            return
        self.status = GAME_OVER
        self.snake.alive = False
        self.snake.death_reason = reason
        self.snake.death_tick = self.tick
        logger.info(f"Game Over: {reason} at {self.snake.head} on tick {self.tick}. Score: {self.score}")

    def run(self) -> GameState:
        """
        Play until the snake dies (or max_ticks is reached), then show the
        game over message once. Returns the final state.
        """
        max_ticks = self.config.max_ticks

        while not self.game_over:
            self.run_tick()
            self.sleep(self.config.tick_interval)
            if max_ticks is not None and self.tick >= max_ticks and not self.game_over:
                logger.info(f"Stopping after max_ticks={max_ticks}")
                break

        self.renderer.show_game_over(self.score, self.width, self.height)
        return self.get_current_state()


# -------------------------------
# Game Runner
# -------------------------------

def run_game(renderer: Renderer, input_source: InputSource, config: GameConfig) -> dict:
    """
    Runs a single game with the given collaborators.

    Returns:
        A dictionary summarizing the game (final_score, ticks, death_reason, ...).
    """
    game = SnakeGame(renderer=renderer, input_source=input_source, config=config)
    final_state = game.run()

    return {
        "final_score": final_state.score,
        "ticks": final_state.tick,
        "status": final_state.status,
        "death_reason": game.snake.death_reason,
        "snake_length": len(game.snake),
    }


def _play_in_terminal(stdscr, config: GameConfig) -> dict:
    # Imported here so the text mode works where curses is missing
    import curses
    from inputs.keyboard import CursesInput
    from renderers.curses_renderer import CursesRenderer

    renderer = CursesRenderer(stdscr, config.width, config.height)
    input_source = CursesInput(stdscr)
    result = run_game(renderer, input_source, config)

    # Keep the message on screen until a fresh key is pressed
    curses.flushinp()
    stdscr.nodelay(False)
    stdscr.getch()
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal. Steer with the arrow keys."
    )
    parser.add_argument("--width", type=int, required=False, default=None,
                        help="Grid columns including the border (default: SNAKE_WIDTH or 32)")
    parser.add_argument("--height", type=int, required=False, default=None,
                        help="Grid rows including the border (default: SNAKE_HEIGHT or 16)")
    parser.add_argument("--tick-ms", dest="tick_interval_ms", type=int, required=False, default=None,
                        help="Delay between updates in milliseconds (default: SNAKE_TICK_INTERVAL_MS or 100)")
    parser.add_argument("--initial-score", type=int, required=False, default=None,
                        help="Starting score (default: SNAKE_INITIAL_SCORE or 5)")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement")
    parser.add_argument("--max-ticks", type=int, required=False, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--renderer", choices=["curses", "text"], default="curses",
                        help="curses for interactive play, text to print frames to stdout")
    parser.add_argument("--moves", type=str, nargs='*', default=None,
                        help="Scripted directions for text mode, one per tick ('-' for no key)")
    parser.add_argument("--ansi", action="store_true",
                        help="Clear the screen before each text frame (text mode only)")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write logs to this file (default: SNAKE_LOG_FILE)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log at DEBUG level")
    return parser


def configure_logging(log_file: Optional[str], verbose: bool):
    if log_file:
        level = logging.DEBUG if verbose else logging.INFO
    else:
        # Without a log file, stderr would scribble over the curses screen
        level = logging.WARNING
    logging.basicConfig(
        filename=log_file,
        level=level,
        format=LOG_FORMAT
    )


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_file or os.getenv("SNAKE_LOG_FILE"), args.verbose)

    try:
        config = GameConfig.from_env().with_overrides(
            width=args.width,
            height=args.height,
            tick_interval_ms=args.tick_interval_ms,
            initial_score=args.initial_score,
            seed=args.seed,
            max_ticks=args.max_ticks
        ).validate()
    except ValueError as e:
        parser.error(str(e))

    if args.renderer == "text":
        from inputs.scripted import ScriptedInput
        from renderers.text_renderer import TextRenderer

        moves = [None if m == '-' else m for m in (args.moves or [])]
        try:
            input_source = ScriptedInput(moves)
        except ValueError as e:
            parser.error(str(e))
        result = run_game(TextRenderer(ansi=args.ansi), input_source, config)
    else:
        import curses
        try:
            result = curses.wrapper(_play_in_terminal, config)
        except ValueError as e:
            parser.error(str(e))

    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
