"""
Game state management for the grid game.
Tracks the board, current player, and move history.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


class Player(Enum):
    """The two players in the game."""
    X = "x"
    O = "o"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# The player who opens every game
FIRST_PLAYER = Player.X

# A cell is either empty (None) or holds a player's mark
Cell = Optional[Player]


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Flat cell index (row * N + col)
    row: int
    col: int
    move_number: int        # Which move this is in the current game (0-based)


def empty_board(board_size: int) -> List[Cell]:
    """Create a fresh board of board_size x board_size empty cells."""
    return [None] * (board_size * board_size)


@dataclass
class GameState:
    """
    The complete state of one game.

    Tracks:
    - The N x N board, stored row-major as a flat list of N*N cells
    - Current player
    - Move history
    """

    board_size: int = 3

    # The board - None means empty, otherwise the player who marked it
    board: Optional[List[Cell]] = None

    # Current player's turn
    current_player: Player = FIRST_PLAYER

    # Move history
    moves: List[Move] = field(default_factory=list)

    def __post_init__(self):
        if self.board is None:
            self.board = empty_board(self.board_size)
        if len(self.board) != self.board_size * self.board_size:
            raise ValueError(
                f"Board must hold {self.board_size * self.board_size} cells, "
                f"got {len(self.board)}"
            )

    @property
    def cell_count(self) -> int:
        return self.board_size * self.board_size

    def index_of(self, row: int, col: int) -> int:
        """Flat index of (row, col)."""
        return row * self.board_size + col

    def position_of(self, index: int) -> Tuple[int, int]:
        """(row, col) of a flat index."""
        return divmod(index, self.board_size)

    def cell(self, row: int, col: int) -> Cell:
        return self.board[self.index_of(row, col)]

    def place(self, index: int) -> Move:
        """
        Put the current player's mark on a cell and hand the turn over.

        No rule checks happen here - the engine validates the move first.

        Args:
            index: Flat cell index.

        Returns:
            The recorded Move.
        """
        row, col = self.position_of(index)
        move = Move(
            player=self.current_player,
            index=index,
            row=row,
            col=col,
            move_number=len(self.moves)
        )
        self.board[index] = self.current_player
        self.moves.append(move)
        self.current_player = self.current_player.opposite()
        return move

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of flat indices, lowest first.
        """
        return [i for i, cell in enumerate(self.board) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board_size=self.board_size,
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves)
        )

    def print_board(self):
        """Print the board to console."""
        n = self.board_size
        print("\n    " + "   ".join(str(col) for col in range(n)))
        print("  ┌" + "┬".join(["───"] * n) + "┐")

        for row in range(n):
            cells = []
            for col in range(n):
                mark = self.cell(row, col)
                cells.append(f" {mark.value.upper()} " if mark else "   ")
            print(f"{row} │" + "│".join(cells) + "│")

            if row < n - 1:
                print("  ├" + "┼".join(["───"] * n) + "┤")

        print("  └" + "┴".join(["───"] * n) + "┘")
