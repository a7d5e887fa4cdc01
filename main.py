"""
Main entry point for the grid game.

This script ties together:
- Display (window, input events, board rendering)
- Logic (board engine, move validation, win detection)
- Game loop (turns, freeze between games)

Run this script to play! Left click to place a mark, Escape to quit.
"""

import sys
import argparse

from display.config import DisplayConfig
from display.renderer import BoardRenderer
from display.window import Window
from logic.board_engine import BoardEngine
from game_loop import GameLoopController, FREEZE_DURATION, TICK_RATE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TicTacToe on an N x N board")
    parser.add_argument(
        "--size",
        type=int,
        default=3,
        help="Cells per side of the board (default: 3)"
    )
    parser.add_argument(
        "--window-size",
        type=int,
        default=512,
        help="Window height and width in pixels (default: 512)"
    )
    parser.add_argument(
        "--freeze",
        type=float,
        default=FREEZE_DURATION,
        help=f"Seconds to show a finished game before resetting (default: {FREEZE_DURATION:g})"
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=TICK_RATE,
        help=f"Frames per second (default: {TICK_RATE})"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print every move and ignored click"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")

    try:
        config = DisplayConfig(board_size=args.size, window_size=args.window_size)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 2

    print("\n" + "=" * 40)
    print(f"   TicTacToe {config.board_size}x{config.board_size}")
    print("=" * 40 + "\n")

    window = Window(config)
    if not window.open():
        return 1

    controller = GameLoopController(
        engine=BoardEngine(config),
        window=window,
        renderer=BoardRenderer(config),
        freeze_duration=args.freeze,
        tick_rate=args.fps,
        verbose=args.verbose
    )

    try:
        controller.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        window.close()
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
