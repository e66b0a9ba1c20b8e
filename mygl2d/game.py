"""A small demo: a clickable circle that beeps and an animated cursor."""

from __future__ import annotations

import argparse
import math
import sys
import time
from collections.abc import Callable, Iterable
from pathlib import Path

import pygame

from mygl2d.animation import Animation, Frame
from mygl2d.keys import MouseButton, mouse_button_from_pygame
from mygl2d.mouse import Mouse
from mygl2d.render import Renderer, image_to_surface
from mygl2d.tga import read_targa

GAME_TITLE = "mygl2d"
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
CURSOR_SIZE = 16
BUTTON_RADIUS = 32
WHITE = (255, 255, 255, 255)
TWO_PI = 2 * math.pi

SPIN_FRAMES = (
    Frame(0, 0, 16, 16),
    Frame(16, 0, 16, 16),
    Frame(32, 0, 16, 16),
    Frame(48, 0, 16, 16),
)

InputState = tuple[tuple[int, int], Iterable[MouseButton]]


def inrect(x: int, y: int, rx: int, ry: int, w: int, h: int) -> bool:
    """Whether ``(x, y)`` lies in the rectangle, edges included."""
    return rx <= x <= rx + w and ry <= y <= ry + h


def incirc(x: int, y: int, cx: int, cy: int, cr: int) -> bool:
    """Whether ``(x, y)`` lies strictly inside the circle."""
    return (cx - x) ** 2 + (cy - y) ** 2 < cr * cr


def rotate_point(
    cx: float, cy: float, angle: float, x: float, y: float
) -> tuple[float, float]:
    """Rotate ``(x, y)`` about ``(cx, cy)`` by ``angle`` radians."""
    s, c = math.sin(angle), math.cos(angle)
    dx, dy = x - cx, y - cy
    return dx * c - dy * s + cx, dx * s + dy * c + cy


def clamp_radians(angle: float) -> float:
    """Remove whole turns from an angle lying outside [-2π, 2π]."""
    if angle < -TWO_PI or angle > TWO_PI:
        turns = angle / TWO_PI
        cycles = math.floor(turns) if angle >= 0 else math.ceil(turns)
        return angle - cycles * TWO_PI
    return angle


def _poll_pygame_input() -> InputState:
    pygame.event.pump()
    position = pygame.mouse.get_pos()
    buttons = {
        mouse_button_from_pygame(number)
        for number, down in enumerate(pygame.mouse.get_pressed(), start=1)
        if down
    }
    return position, buttons


class Game:
    """Game state plus one step of update and drawing."""

    def __init__(
        self,
        surface: pygame.Surface,
        spin: pygame.Surface,
        beep=None,
        *,
        poll_input: Callable[[], InputState] | None = None,
        windowed: bool = False,
    ) -> None:
        self.renderer = Renderer(surface)
        self.spin = spin
        self.beep = beep
        self.mouse = Mouse()
        self.animation = Animation(SPIN_FRAMES, frame_duration=1.0)
        self.hold = False
        self._poll_input = poll_input or _poll_pygame_input
        self._windowed = windowed

    def update(self, delta_time: float) -> None:
        position, buttons = self._poll_input()
        self.mouse.update(position, buttons)
        self.animation.update(delta_time)

    def _clamp_mouse(self) -> None:
        x = min(max(self.mouse.x, 0), SCREEN_WIDTH - CURSOR_SIZE)
        y = min(max(self.mouse.y, 0), SCREEN_HEIGHT - CURSOR_SIZE)
        if (x, y) != (self.mouse.x, self.mouse.y):
            self.mouse.x, self.mouse.y = x, y
            if self._windowed:
                pygame.mouse.set_pos((x, y))

    def draw(self) -> None:
        renderer = self.renderer
        renderer.clear()
        renderer.color = WHITE
        cx, cy = SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2
        if self.mouse.is_left_button_down and incirc(
            self.mouse.x, self.mouse.y, cx, cy, BUTTON_RADIUS
        ):
            renderer.fill_circle(cx, cy, BUTTON_RADIUS)
            if not self.hold:
                if self.beep is not None:
                    self.beep.play()
                self.hold = True
        else:
            renderer.draw_circle(cx, cy, BUTTON_RADIUS)
            self.hold = False

        self._clamp_mouse()
        renderer.draw_image_with_clip(
            self.spin, self.animation.frame, self.mouse.x, self.mouse.y
        )
        if self._windowed:
            pygame.display.flip()


def _load_sprite(path: Path) -> pygame.Surface:
    try:
        return image_to_surface(read_targa(path))
    except (OSError, ValueError) as error:
        print(f"Error loading {path}: {error}", file=sys.stderr)
        return pygame.Surface((64, 16), pygame.SRCALPHA)


def _load_sound(path: Path):
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, FileNotFoundError):
        return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog=GAME_TITLE, description="Run the demo game.")
    parser.add_argument(
        "--assets", type=Path, default=Path("."),
        help="directory holding images/ and beep.mp3",
    )
    args = parser.parse_args(argv)

    pygame.display.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)
        pygame.mouse.set_visible(False)
        spin = _load_sprite(args.assets / "images" / "spin.tga")
        try:
            pygame.mixer.init()
        except pygame.error:
            return -1
        game = Game(screen, spin, _load_sound(args.assets / "beep.mp3"), windowed=True)

        start = time.perf_counter()
        last_time = 0.0
        quit_requested = False
        while not quit_requested:
            current_time = time.perf_counter() - start
            delta_time = current_time - last_time
            last_time = current_time
            game.update(delta_time)
            game.draw()
            quit_requested = bool(pygame.event.get(pygame.QUIT)) or bool(
                pygame.key.get_pressed()[pygame.K_ESCAPE]
            )
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())