"""
Window module for the grid game.
Handles the OpenCV window, presenting frames and collecting input events.
"""

import cv2
import numpy as np
from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .config import DisplayConfig

ESCAPE_KEY = 27


class EventType(Enum):
    """Kinds of input the window delivers."""
    QUIT = "quit"
    KEY_DOWN = "key_down"
    MOUSE_DOWN = "mouse_down"


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


# OpenCV mouse events we translate into button presses
_BUTTON_EVENTS = {
    cv2.EVENT_LBUTTONDOWN: MouseButton.LEFT,
    cv2.EVENT_RBUTTONDOWN: MouseButton.RIGHT,
    cv2.EVENT_MBUTTONDOWN: MouseButton.MIDDLE,
}


@dataclass
class InputEvent:
    """
    One discrete input event.
    """
    type: EventType
    x: int = 0                          # Window pixel coordinates (mouse events)
    y: int = 0
    button: Optional[MouseButton] = None
    key: Optional[int] = None           # Key code (key events)

    @classmethod
    def quit(cls) -> "InputEvent":
        return cls(EventType.QUIT)

    @classmethod
    def key_down(cls, key: int) -> "InputEvent":
        return cls(EventType.KEY_DOWN, key=key)

    @classmethod
    def mouse_down(cls, x: int, y: int, button: MouseButton = MouseButton.LEFT) -> "InputEvent":
        return cls(EventType.MOUSE_DOWN, x=x, y=y, button=button)


class Window:
    """
    Simple OpenCV window wrapper.
    Opens the window, shows frames and queues mouse/key input until polled.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the window.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()
        self.is_opened = False
        self._pending: List[InputEvent] = []

    def open(self) -> bool:
        """
        Create the window and hook up the mouse callback.

        Returns:
            True if the window was created, False otherwise.
        """
        name = self.config.window_name
        print(f"Opening window '{name}' ({self.config.window_size}x{self.config.window_size})...")

        try:
            cv2.namedWindow(name, cv2.WINDOW_AUTOSIZE)
            cv2.setMouseCallback(name, self._on_mouse)
        except cv2.error as e:
            print(f"ERROR: Could not create window: {e}")
            return False

        self.is_opened = True
        return True

    def _on_mouse(self, event, x, y, flags, param):
        """OpenCV mouse callback - only queues, never dispatches."""
        button = _BUTTON_EVENTS.get(event)
        if button is not None:
            self._pending.append(InputEvent.mouse_down(x, y, button))

    def poll_events(self) -> List[InputEvent]:
        """
        Drain all input that arrived since the last poll. Never blocks
        beyond the 1 ms OpenCV needs to pump its event queue.

        Returns:
            Events in arrival order; a QUIT is appended if the window was closed.
        """
        if not self.is_opened:
            return [InputEvent.quit()]

        key = cv2.waitKey(1)

        events, self._pending = self._pending, []
        if key != -1:
            events.append(InputEvent.key_down(key & 0xFF))

        if not self._is_visible():
            events.append(InputEvent.quit())

        return events

    def _is_visible(self) -> bool:
        try:
            return cv2.getWindowProperty(self.config.window_name, cv2.WND_PROP_VISIBLE) >= 1
        except cv2.error:
            return False

    def present(self, frame: np.ndarray):
        """Show a rendered frame."""
        if self.is_opened:
            cv2.imshow(self.config.window_name, frame)

    def close(self):
        """Close the window and release resources."""
        if self.is_opened:
            cv2.destroyWindow(self.config.window_name)
        self.is_opened = False
        self._pending = []
        print("Window closed.")

    def __enter__(self):
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
