"""
Win checker for the grid game.
Checks if a player has won or if the game is a draw.

Every winning line is described as data (a start cell plus a step vector),
so the same scan works for any board size.
"""

from typing import Optional, List, Tuple, Iterator
from dataclasses import dataclass
from .game_state import GameState, Player


@dataclass(frozen=True)
class Line:
    """
    A row, column or full diagonal of the board.
    """
    name: str                   # e.g. "row 0", "main diagonal"
    start: Tuple[int, int]      # (row, col) of the first cell
    step: Tuple[int, int]       # (row delta, col delta) between cells
    length: int

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the (row, col) positions on this line."""
        row, col = self.start
        d_row, d_col = self.step
        for i in range(self.length):
            yield row + i * d_row, col + i * d_col

    def indices(self, board_size: int) -> List[int]:
        """Flat indices of the cells on this line."""
        return [row * board_size + col for row, col in self.cells()]


def generate_lines(board_size: int) -> List[Line]:
    """
    Build every line that can win the game, in scan order.

    Rows top to bottom, then columns left to right, then the main diagonal,
    then the anti-diagonal: 2N + 2 lines of length N.
    """
    n = board_size
    lines = [Line(f"row {r}", (r, 0), (0, 1), n) for r in range(n)]
    lines += [Line(f"column {c}", (0, c), (1, 0), n) for c in range(n)]
    lines.append(Line("main diagonal", (0, 0), (1, 1), n))
    lines.append(Line("anti-diagonal", (0, n - 1), (1, -1), n))
    return lines


@dataclass(frozen=True)
class Outcome:
    """
    Result of a finished game: a winner (with the line they completed) or a draw.
    """
    winner: Optional[Player] = None
    is_draw: bool = False
    line: Optional[Line] = None

    @property
    def message(self) -> str:
        if self.winner is not None:
            return f"{self.winner.value.upper()} WINS! ({self.line.name})"
        return "It's a DRAW!"


class WinChecker:
    """
    Checks for win conditions.

    Win condition: N marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    def __init__(self, board_size: int = 3):
        self.board_size = board_size
        self.lines = generate_lines(board_size)

    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(game_state)
        if line is None:
            return None
        row, col = line.start
        return game_state.cell(row, col)

    def get_winning_line(self, game_state: GameState) -> Optional[Line]:
        """
        Get the first winning line in scan order, if there is one.

        Args:
            game_state: The game state.

        Returns:
            The winning Line, or None.
        """
        for line in self.lines:
            if self._check_line(game_state.board, line) is not None:
                return line
        return None

    def _check_line(self, board: List[Optional[Player]], line: Line) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The winning Player if every cell holds the same mark, None otherwise.
        """
        marks = {board[i] for i in line.indices(self.board_size)}
        if len(marks) != 1:
            return None
        return marks.pop()

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw: all cells are filled AND no winner.
        """
        if self.check_winner(game_state) is not None:
            return False
        return game_state.is_full()

    def evaluate(self, game_state: GameState) -> Optional[Outcome]:
        """
        Evaluate the board after a move.

        Scans every line, not just the ones through the last move.

        Returns:
            An Outcome if the game is over, None while it continues.
        """
        line = self.get_winning_line(game_state)
        if line is not None:
            row, col = line.start
            return Outcome(winner=game_state.cell(row, col), line=line)

        if game_state.is_full():
            return Outcome(is_draw=True)

        return None
