"""
Move validator for the grid game.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState


class MoveRejected(Exception):
    """Raised when a placement breaks the rules. Carries the reason."""


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates moves.

    Rules:
    1. The index must address a cell on the board
    2. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Flat cell index to place a mark on.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if index is on the board
        if not 0 <= index < game_state.cell_count:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{game_state.cell_count - 1}."
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant is not None:
            row, col = game_state.position_of(index)
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.value.upper()}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of valid flat indices.
        """
        return game_state.get_empty_cells()
