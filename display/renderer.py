"""
Board renderer for the grid game.
Draws the board into an OpenCV (numpy BGR) frame.
"""

import cv2
import numpy as np
from typing import Optional, Sequence, Tuple
from .config import DisplayConfig, Color
from logic.game_state import Cell, Player

Rect = Tuple[int, int, int, int]


def fill_rectangle(frame: np.ndarray, rect: Rect, color: Color):
    """Fill an (x, y, width, height) rectangle with the given colour."""
    x, y, w, h = rect
    if w <= 0 or h <= 0:
        return
    cv2.rectangle(frame, (x, y), (x + w - 1, y + h - 1), color, -1)


def draw_rectangle(frame: np.ndarray, rect: Rect, color: Color, thickness: int = 1):
    """Outline an (x, y, width, height) rectangle."""
    x, y, w, h = rect
    cv2.rectangle(frame, (x, y), (x + w - 1, y + h - 1), color, thickness)


class BoardRenderer:
    """
    Renders the board as a square window image.

    Layout (outside in):
    - Background
    - Border ring, border_thickness wide
    - Playing area, subdivided into an N x N grid of cells
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()

    def mark_color(self, mark: Player) -> Color:
        return self.config.x_color if mark == Player.X else self.config.o_color

    def render(
        self,
        board: Sequence[Cell],
        highlight: Optional[Sequence[int]] = None
    ) -> np.ndarray:
        """
        Draw one frame.

        Args:
            board: Flat row-major list of cells.
            highlight: Cell indices to outline (e.g. the winning line).

        Returns:
            BGR image of window_size x window_size pixels.
        """
        cfg = self.config
        size = cfg.window_size
        border = cfg.border_thickness

        frame = np.zeros((size, size, 3), dtype=np.uint8)
        fill_rectangle(frame, (0, 0, size, size), cfg.background_color)
        fill_rectangle(
            frame,
            (border, border, size - border * 2, size - border * 2),
            cfg.border_color
        )
        # The fill-in strip stays border coloured so the last row/column
        # of cells meets the border without a gap
        fill_rectangle(
            frame,
            (cfg.playing_area_offset, cfg.playing_area_offset, cfg.grid_size, cfg.grid_size),
            cfg.background_color
        )

        for index, mark in enumerate(board):
            rect = cfg.cell_rect(index)
            draw_rectangle(frame, rect, cfg.grid_color)

            if mark is not None:
                x, y, w, h = rect
                pad = cfg.mark_padding
                fill_rectangle(
                    frame,
                    (x + pad, y + pad, w - pad * 2, h - pad * 2),
                    self.mark_color(mark)
                )

        for index in highlight or ():
            draw_rectangle(frame, cfg.cell_rect(index), cfg.highlight_color, 3)

        return frame
