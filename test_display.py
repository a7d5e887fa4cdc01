"""
Tests for the display layer: layout config and board rendering.
Rendering draws into numpy arrays, so no window is needed.
"""

import numpy as np
import pytest

from display.config import DisplayConfig, BLACK, WHITE
from display.renderer import BoardRenderer
from logic.game_state import Player


def pixel(frame, x, y):
    return tuple(int(v) for v in frame[y, x])


# ==================== CONFIG ====================

def test_default_layout():
    cfg = DisplayConfig()
    assert cfg.playing_area_offset == 20
    assert cfg.playing_area_size == 472
    assert cfg.square_size == 157
    assert cfg.grid_size == 471
    assert cfg.fill_in == 1


def test_4x4_layout_has_no_fill_in():
    cfg = DisplayConfig(board_size=4)
    assert cfg.square_size == 118
    assert cfg.fill_in == 0


def test_cell_rect():
    cfg = DisplayConfig()
    assert cfg.cell_rect(0) == (20, 20, 157, 157)
    assert cfg.cell_rect(5) == (20 + 2 * 157, 20 + 157, 157, 157)
    assert cfg.cell_center(4) == (20 + 157 + 78, 20 + 157 + 78)


def test_config_is_immutable():
    cfg = DisplayConfig()
    with pytest.raises(Exception):
        cfg.board_size = 4


@pytest.mark.parametrize("kwargs", [
    {"board_size": 0},
    {"window_size": 40},
    {"board_size": 500},
    {"border_thickness": -1},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        DisplayConfig(**kwargs)


# ==================== RENDERER ====================

def test_empty_board_frame():
    cfg = DisplayConfig()
    frame = BoardRenderer(cfg).render([None] * 9)

    assert frame.shape == (512, 512, 3)
    assert frame.dtype == np.uint8
    assert pixel(frame, 0, 0) == BLACK              # background
    assert pixel(frame, 10, 10) == WHITE            # border
    assert pixel(frame, 15, 256) == WHITE
    assert pixel(frame, 20, 100) == WHITE           # cell outline
    assert pixel(frame, *cfg.cell_center(4)) == BLACK  # empty cell


def test_fill_in_strip_is_border_colored():
    cfg = DisplayConfig()
    frame = BoardRenderer(cfg).render([None] * 9)
    x = cfg.playing_area_offset + cfg.grid_size     # first pixel past the last cell
    assert pixel(frame, x, 100) == WHITE


def test_marks_use_player_colors():
    cfg = DisplayConfig()
    board = [None] * 9
    board[0] = Player.X
    board[8] = Player.O
    frame = BoardRenderer(cfg).render(board)

    assert pixel(frame, *cfg.cell_center(0)) == cfg.x_color
    assert pixel(frame, *cfg.cell_center(8)) == cfg.o_color
    assert pixel(frame, *cfg.cell_center(4)) == BLACK

    # Padding between outline and mark stays background
    x, y, _, _ = cfg.cell_rect(0)
    assert pixel(frame, x + cfg.mark_padding // 2, y + 60) == BLACK


def test_highlight_outlines_cells():
    cfg = DisplayConfig()
    board = [Player.X, Player.X, Player.X] + [None] * 6
    frame = BoardRenderer(cfg).render(board, highlight=[0, 1, 2])

    x, y, w, h = cfg.cell_rect(1)
    assert pixel(frame, x, y + h // 2) == cfg.highlight_color
    x, y, w, h = cfg.cell_rect(4)
    assert pixel(frame, x, y + h // 2) == cfg.grid_color


def test_4x4_render():
    cfg = DisplayConfig(board_size=4)
    board = [None] * 16
    board[15] = Player.O
    frame = BoardRenderer(cfg).render(board)
    assert pixel(frame, *cfg.cell_center(15)) == cfg.o_color
