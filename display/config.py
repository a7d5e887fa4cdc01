"""
Display configuration for the grid game.
Window geometry, board size and colours.

The config is immutable and handed to the engine, renderer and window at
construction, so several board sizes can live side by side (e.g. in tests).
"""

from dataclasses import dataclass
from typing import Tuple

# Colours are BGR, as OpenCV expects
Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)


@dataclass(frozen=True)
class DisplayConfig:
    """
    Configuration class for the game window.
    Change these values to resize the board or window.
    """

    # ==================== BOARD SETTINGS ====================
    # Cells per side (3 = classic tic-tac-toe)
    board_size: int = 3

    # ==================== WINDOW SETTINGS ====================
    window_name: str = "TicTacToe"
    window_size: int = 512          # Height and width of the window, in pixels
    border_thickness: int = 10      # Width of the outer border of the playing area
    mark_padding: int = 8           # Gap between a cell outline and its mark fill

    # ==================== COLOURS ====================
    background_color: Color = BLACK
    border_color: Color = WHITE
    grid_color: Color = WHITE
    x_color: Color = (60, 60, 220)      # red
    o_color: Color = (220, 140, 40)     # blue
    highlight_color: Color = (0, 215, 255)  # gold, outlines the winning line

    def __post_init__(self):
        if self.board_size < 1:
            raise ValueError(f"board_size must be at least 1, got {self.board_size}")
        if self.border_thickness < 0:
            raise ValueError("border_thickness cannot be negative")
        if self.square_size < 1:
            raise ValueError(
                f"Window of {self.window_size}px is too small for a "
                f"{self.board_size}x{self.board_size} board"
            )

    # ==================== DERIVED LAYOUT ====================
    @property
    def playing_area_offset(self) -> int:
        """The coordinate where the playing area starts."""
        return self.border_thickness * 2

    @property
    def playing_area_size(self) -> int:
        """Height and width of the playing area, in pixels."""
        return self.window_size - self.playing_area_offset * 2

    @property
    def square_size(self) -> int:
        """Height and width of each cell, in pixels."""
        return self.playing_area_size // self.board_size

    @property
    def grid_size(self) -> int:
        """Height and width covered by the cells themselves."""
        return self.square_size * self.board_size

    @property
    def fill_in(self) -> int:
        """Extra pixels the border must cover so no gap shows after the last cell."""
        return self.playing_area_size - self.grid_size

    def cell_rect(self, index: int) -> Tuple[int, int, int, int]:
        """
        Pixel rectangle of a cell.

        Returns:
            (x, y, width, height) in window coordinates.
        """
        row, col = divmod(index, self.board_size)
        x = self.playing_area_offset + col * self.square_size
        y = self.playing_area_offset + row * self.square_size
        return x, y, self.square_size, self.square_size

    def cell_center(self, index: int) -> Tuple[int, int]:
        x, y, w, h = self.cell_rect(index)
        return x + w // 2, y + h // 2
