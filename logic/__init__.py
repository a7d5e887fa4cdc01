"""
Logic module for the grid game.
Handles game state, rules, and win detection.
"""

from .game_state import GameState, Player, Move
from .move_validator import MoveValidator, MoveRejected
from .win_checker import WinChecker, Outcome, Line, generate_lines
from .board_engine import BoardEngine
