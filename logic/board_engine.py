"""
Board engine for the grid game.
The single owner of the board: maps clicks to cells, applies moves,
resets and evaluates the game.
"""

from typing import Optional, List
from display.config import DisplayConfig
from .game_state import GameState, Player, Cell, Move
from .move_validator import MoveValidator, MoveRejected
from .win_checker import WinChecker, Outcome


class BoardEngine:
    """
    Authoritative board state and rules.

    The engine does not know about game phases - the game loop decides
    when moves are allowed.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the engine with an empty board.

        Args:
            config: Layout used to map window pixels to cells.
        """
        self.config = config or DisplayConfig()
        self.validator = MoveValidator()
        self.win_checker = WinChecker(self.config.board_size)
        self.state = GameState(board_size=self.config.board_size)

    @property
    def board_size(self) -> int:
        return self.config.board_size

    @property
    def board(self) -> List[Cell]:
        return self.state.board

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    def coordinates_to_cell_index(self, x: int, y: int) -> Optional[int]:
        """
        Work out which cell a window pixel lies in.

        The first pixel row/column of the playing area belongs to the grid;
        anything left of or above it, or at or past the far edge of the
        last cell, is outside.

        Args:
            x: Window pixel X.
            y: Window pixel Y.

        Returns:
            Flat cell index, or None if outside the playing area.
        """
        offset = self.config.playing_area_offset
        play_x = x - offset
        play_y = y - offset
        limit = self.config.grid_size

        if play_x < 0 or play_y < 0 or play_x >= limit or play_y >= limit:
            return None

        col = play_x // self.config.square_size
        row = play_y // self.config.square_size
        return row * self.board_size + col

    def apply_move(self, index: int) -> Move:
        """
        Place the current player's mark and pass the turn.

        Args:
            index: Flat cell index.

        Returns:
            The recorded Move.

        Raises:
            MoveRejected: The cell is occupied or off the board. Nothing changes.
        """
        result = self.validator.validate_move(self.state, index)
        if not result.is_valid:
            raise MoveRejected(result.error_message)
        return self.state.place(index)

    def reset(self):
        """Start over with an empty board and the first player to move."""
        self.state = GameState(board_size=self.board_size)

    def evaluate(self) -> Optional[Outcome]:
        """
        Check the board for a win or draw.

        Returns:
            The Outcome, or None if the game goes on.
        """
        return self.win_checker.evaluate(self.state)
