"""Sprite-sheet frames and frame-based animation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Frame:
    """A rectangle within a sprite sheet, in pixels from the top left."""

    x: int
    y: int
    w: int
    h: int


@dataclass
class Animation:
    """A looping sequence of frames shown for a fixed time each."""

    frames: Sequence[Frame]
    frame_duration: float
    current_frame: int = 0
    elapsed_time: float = 0.0

    @property
    def frame(self) -> Frame:
        """The frame currently shown."""
        return self.frames[self.current_frame]

    def update(self, delta_time: float) -> None:
        """Advance the clock by ``delta_time`` seconds, at most one frame."""
        self.elapsed_time += delta_time
        if self.elapsed_time >= self.frame_duration:
            self.elapsed_time = 0.0
            self.current_frame += 1
            if self.current_frame >= len(self.frames):
                self.current_frame = 0


def clip_tex_coords(
    tex_width: int, tex_height: int, clip: Frame
) -> tuple[float, float, float, float]:
    """Texture coordinates ``(u1, v1, u2, v2)`` of ``clip``, v measured from the bottom."""
    u1 = clip.x / tex_width
    v1 = (tex_height - (clip.y + clip.h)) / tex_height
    u2 = (clip.x + clip.w) / tex_width
    v2 = (tex_height - clip.y) / tex_height
    return u1, v1, u2, v2