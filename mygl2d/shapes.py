"""Vertex lists for the outlines and fans of simple shapes."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable

Point = tuple[int, int]

_SEGMENTS = 100
_PI = 3.1415926


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _theta(i: int) -> float:
    return _f32(_f32(_f32(2.0 * _f32(_PI)) * i) / _SEGMENTS)


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _rim(cx: int, cy: int, rx: int, ry: int, count: int) -> list[Point]:
    return [
        (_round(cx + rx * math.cos(theta)), _round(cy + ry * math.sin(theta)))
        for theta in map(_theta, range(count))
    ]


def rect_outline(x: int, y: int, w: int, h: int) -> list[Point]:
    """Corners of a rectangle, clockwise from ``(x, y)``."""
    return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]


def oval_outline(cx: int, cy: int, rx: int, ry: int) -> list[Point]:
    """Closed-loop vertices of an ellipse."""
    return _rim(cx, cy, rx, ry, _SEGMENTS)


def oval_fan(cx: int, cy: int, rx: int, ry: int) -> list[Point]:
    """Triangle-fan vertices of a filled ellipse: the centre, then the rim."""
    return [(cx, cy), *_rim(cx, cy, rx, ry, _SEGMENTS + 1)]


def circle_outline(cx: int, cy: int, r: int) -> list[Point]:
    """Closed-loop vertices of a circle."""
    return oval_outline(cx, cy, r, r)


def circle_fan(cx: int, cy: int, r: int) -> list[Point]:
    """Triangle-fan vertices of a filled circle: the centre, then the rim."""
    return oval_fan(cx, cy, r, r)


def polygon_vertices(points: Iterable[tuple[int, int]]) -> list[Point]:
    """Vertices of a polygon, or an empty list if there are fewer than three."""
    vertices = [(int(x), int(y)) for x, y in points]
    return vertices if len(vertices) >= 3 else []