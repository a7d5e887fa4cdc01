"""
Display module for the grid game.
Handles the window, input events and board rendering.
"""

from .config import DisplayConfig
from .renderer import BoardRenderer
from .window import Window, InputEvent, EventType, MouseButton
