"""
Tests for the command line entry point (no window is opened).
"""

import pytest

import main
from game_loop import FREEZE_DURATION, TICK_RATE


def test_defaults():
    args = main.build_parser().parse_args([])
    assert args.size == 3
    assert args.window_size == 512
    assert args.freeze == FREEZE_DURATION
    assert args.fps == TICK_RATE
    assert args.verbose is False


def test_options():
    args = main.build_parser().parse_args(["--size", "4", "--freeze", "0.5", "--verbose"])
    assert args.size == 4
    assert args.freeze == 0.5
    assert args.verbose is True


def test_invalid_board_size_exits_before_opening_window(capsys):
    assert main.main(["--size", "0"]) == 2
    assert "ERROR" in capsys.readouterr().out


def test_invalid_fps():
    with pytest.raises(SystemExit):
        main.main(["--fps", "0"])


def test_window_failure_exits_with_error(monkeypatch):
    monkeypatch.setattr(main.Window, "open", lambda self: False)
    assert main.main([]) == 1
