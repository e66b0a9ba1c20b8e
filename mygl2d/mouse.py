"""Mouse position and button state."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mygl2d.keys import MouseButton


@dataclass
class Mouse:
    """Last known mouse position and state of the left and right buttons."""

    x: int = 0
    y: int = 0
    is_left_button_down: bool = False
    is_right_button_down: bool = False

    def update(self, position: tuple[int, int], buttons: Iterable[int]) -> None:
        """Record a new position and the set of buttons held down."""
        self.x, self.y = position
        pressed = set(buttons)
        self.is_left_button_down = MouseButton.LEFT in pressed
        self.is_right_button_down = MouseButton.RIGHT in pressed