"""Immediate-mode 2D drawing onto a pygame surface."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence
from os import PathLike

import pygame

from mygl2d.animation import Frame
from mygl2d.shapes import (
    Point,
    circle_fan,
    circle_outline,
    oval_fan,
    oval_outline,
    polygon_vertices,
    rect_outline,
)
from mygl2d.tga import TgaImage, read_targa

_MODES = {3: "RGB", 4: "RGBA"}


def image_to_surface(image: TgaImage) -> pygame.Surface:
    """Build a pygame surface from decoded Targa pixels."""
    try:
        mode = _MODES[image.channels]
    except KeyError:
        raise ValueError(f"unsupported channel count: {image.channels}") from None
    surface = pygame.image.frombuffer(image.pixels, (image.width, image.height), mode)
    return surface.copy()


class Renderer:
    """Draws shapes and images onto a surface in the current colour."""

    def __init__(self, surface: pygame.Surface, color=(255, 255, 255, 255)) -> None:
        self.surface = surface
        self.color = color

    def _loop(self, vertices: Sequence[Point]) -> None:
        if len(vertices) >= 2:
            pygame.draw.lines(self.surface, self.color, True, vertices)

    def _fan(self, vertices: Sequence[Point]) -> None:
        if len(vertices) < 3:
            return
        centre = vertices[0]
        for a, b in itertools.pairwise(vertices[1:]):
            pygame.draw.polygon(self.surface, self.color, [centre, a, b])

    def clear(self) -> None:
        """Fill the whole surface with opaque black."""
        self.surface.fill((0, 0, 0, 255))

    def draw_point(self, x: int, y: int) -> None:
        self.surface.set_at((x, y), self.color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        pygame.draw.line(self.surface, self.color, (x1, y1), (x2, y2))

    def draw_rect(self, x: int, y: int, w: int, h: int) -> None:
        self._loop(rect_outline(x, y, w, h))

    def fill_rect(self, x: int, y: int, w: int, h: int) -> None:
        rect = pygame.Rect(x, y, w, h)
        rect.normalize()
        self.surface.fill(self.color, rect)

    def draw_circle(self, cx: int, cy: int, r: int) -> None:
        self._loop(circle_outline(cx, cy, r))

    def fill_circle(self, cx: int, cy: int, r: int) -> None:
        self._fan(circle_fan(cx, cy, r))

    def draw_oval(self, cx: int, cy: int, rx: int, ry: int) -> None:
        self._loop(oval_outline(cx, cy, rx, ry))

    def fill_oval(self, cx: int, cy: int, rx: int, ry: int) -> None:
        self._fan(oval_fan(cx, cy, rx, ry))

    def draw_polygon(self, points: Iterable[tuple[int, int]]) -> None:
        """Outline a polygon; fewer than three points draw nothing."""
        self._loop(polygon_vertices(points))

    def fill_polygon(self, points: Iterable[tuple[int, int]]) -> None:
        """Fill a polygon as a fan from its first point."""
        self._fan(polygon_vertices(points))

    def load_targa(self, path: str | PathLike[str]) -> pygame.Surface:
        """Load a Targa file as a surface ready for drawing."""
        return image_to_surface(read_targa(path))

    def draw_image(self, surface: pygame.Surface, x: float, y: float) -> None:
        self.surface.blit(surface, (int(x), int(y)))

    def draw_image_with_clip(
        self, surface: pygame.Surface, clip: Frame, x: float, y: float
    ) -> None:
        """Draw the ``clip`` part of ``surface`` with its top left at ``(x, y)``."""
        area = pygame.Rect(clip.x, clip.y, clip.w, clip.h)
        self.surface.blit(surface, (int(x), int(y)), area)