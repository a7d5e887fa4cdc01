"""
Game loop for the grid game.

Runs one game after another at a fixed tick rate:
- Active: clicks are turned into moves
- Frozen: the finished board stays on screen, input is thrown away,
  then a fresh game starts
"""

import time
from enum import Enum
from typing import Optional, Callable

from display.renderer import BoardRenderer
from display.window import EventType, MouseButton, InputEvent, ESCAPE_KEY
from logic.board_engine import BoardEngine
from logic.game_state import Player
from logic.move_validator import MoveRejected
from logic.win_checker import Outcome

# How long a finished game stays on screen, in seconds
FREEZE_DURATION = 2.0

# Frames per second
TICK_RATE = 60


class GamePhase(Enum):
    ACTIVE = "active"   # Accepting input, board mutable
    FROZEN = "frozen"   # Showing the result, input ignored


class GameLoopController:
    """
    Drives the Active/Frozen cycle against a window and a renderer.

    The window only needs poll_events() and present(frame); the clock and
    sleep functions can be swapped out so the loop runs without real time.
    """

    def __init__(
        self,
        engine: BoardEngine,
        window,
        renderer: BoardRenderer,
        freeze_duration: float = FREEZE_DURATION,
        tick_rate: int = TICK_RATE,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        verbose: bool = False
    ):
        """
        Initialize the controller.

        Args:
            engine: The board engine to drive.
            window: Input source and frame sink.
            renderer: Turns the board into frames.
            freeze_duration: Seconds a finished game stays on screen.
            tick_rate: Ticks per second.
            clock: Returns the current time in seconds.
            sleep: Blocks for the given number of seconds.
            verbose: Print rejected clicks.
        """
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate}")

        self.engine = engine
        self.window = window
        self.renderer = renderer
        self.freeze_duration = freeze_duration
        self.tick_duration = 1.0 / tick_rate
        self.clock = clock
        self.sleep = sleep
        self.verbose = verbose

        self.phase = GamePhase.ACTIVE
        self.frozen_until: Optional[float] = None
        self.last_outcome: Optional[Outcome] = None
        self.is_running = False

        # Running tally across games
        self.games_played = 0
        self.wins = {Player.X: 0, Player.O: 0}
        self.draws = 0

    def run(self):
        """Tick until quit is requested."""
        self.is_running = True
        while self.tick():
            self.sleep(self.tick_duration)

    def tick(self) -> bool:
        """
        Run one frame.

        Returns:
            False once quit was requested, True otherwise.
        """
        now = self.clock()
        events = self.window.poll_events()

        if self.phase == GamePhase.FROZEN:
            if now > self.frozen_until:
                self._start_new_game()
            # Clicks made during the freeze never reach the next game
            events = []

        for event in events:
            if self._is_quit(event):
                print("\nGame quit by user.")
                self.is_running = False
                return False

            if event.type == EventType.MOUSE_DOWN and event.button == MouseButton.LEFT:
                if self._handle_click(event) and self._check_game_over(now):
                    # The rest of this tick's input arrived after the game ended
                    break

        self._draw()
        return True

    def _is_quit(self, event: InputEvent) -> bool:
        if event.type == EventType.QUIT:
            return True
        return event.type == EventType.KEY_DOWN and event.key == ESCAPE_KEY

    def _handle_click(self, event: InputEvent) -> bool:
        """
        Turn a left click into a move.

        Returns:
            True if a mark was placed.
        """
        index = self.engine.coordinates_to_cell_index(event.x, event.y)
        if index is None:
            return False

        try:
            move = self.engine.apply_move(index)
        except MoveRejected as e:
            # Clicking an occupied cell does nothing
            if self.verbose:
                print(f"Ignored click at ({event.x}, {event.y}): {e}")
            return False

        if self.verbose:
            print(f"{move.player.value.upper()} -> ({move.row}, {move.col})")
        return True

    def _check_game_over(self, now: float) -> bool:
        """Freeze the board if the last move ended the game."""
        outcome = self.engine.evaluate()
        if outcome is None:
            return False

        self.phase = GamePhase.FROZEN
        self.frozen_until = now + self.freeze_duration
        self.last_outcome = outcome
        self._record_outcome(outcome)
        self._show_game_result(outcome)
        return True

    def _start_new_game(self):
        """Leave the freeze with a fresh board."""
        self.engine.reset()
        self.phase = GamePhase.ACTIVE
        self.frozen_until = None
        self.last_outcome = None

    def _record_outcome(self, outcome: Outcome):
        self.games_played += 1
        if outcome.winner is not None:
            self.wins[outcome.winner] += 1
        else:
            self.draws += 1

    def _show_game_result(self, outcome: Outcome):
        """Print the final board and result."""
        print("\n" + "=" * 40)
        print(f"   GAME {self.games_played} OVER!")
        print("=" * 40)

        self.engine.state.print_board()

        print(f"\n{outcome.message}")
        print(f"Score: X {self.wins[Player.X]} - O {self.wins[Player.O]} (draws: {self.draws})")
        print(f"New game in {self.freeze_duration:g}s...")

    def _draw(self):
        highlight = None
        if self.phase == GamePhase.FROZEN and self.last_outcome and self.last_outcome.line:
            highlight = self.last_outcome.line.indices(self.engine.board_size)

        frame = self.renderer.render(self.engine.board, highlight)
        self.window.present(frame)
