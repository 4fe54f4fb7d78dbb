"""Animated sprites described by Lisp property lists."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Tuple

from tuxjump.config import LispReader

__all__ = ["SpriteError", "Sprite"]


class SpriteError(ValueError):
    """Raised for a sprite definition that lacks required data."""


@dataclass
class Sprite:
    """A named sequence of image frames shown at a fixed rate."""

    name: str
    images: Tuple[str, ...] = field(default_factory=tuple)
    x_hotspot: int = 0
    y_hotspot: int = 0
    fps: float = 10.0

    @classmethod
    def from_lisp(cls, obj: Any) -> "Sprite":
        """Build a sprite from data such as ``((name "x") (images "a.png") ...)``."""
        reader = LispReader(obj)
        name = reader.read_string("name")
        if name is None:
            raise SpriteError("sprite without name")
        images = reader.read_string_vector("images")
        if not images:
            raise SpriteError(f"sprite contains no images: {name}")
        x_hotspot = reader.read_int("x-hotspot")
        y_hotspot = reader.read_int("y-hotspot")
        fps = reader.read_float("fps")
        return cls(
            name=name,
            images=tuple(images),
            x_hotspot=0 if x_hotspot is None else x_hotspot,
            y_hotspot=0 if y_hotspot is None else y_hotspot,
            fps=10.0 if fps is None else fps,
        )

    @property
    def frame_delay(self) -> float:
        """Milliseconds each frame is shown."""
        if self.fps == 0:
            return math.inf
        return 1000.0 / self.fps

    def frame_at(self, ticks: float) -> int:
        """Return the index of the frame shown at ``ticks`` milliseconds."""
        count = len(self.images)
        if count == 0:
            raise SpriteError(f"sprite has no frames: {self.name}")
        delay = self.frame_delay
        frame = int(math.fmod(ticks, count * delay) / delay)
        return frame % count

    def draw_position(self, x: float, y: float) -> Tuple[float, float]:
        """Return the top-left corner for drawing with the hotspot at ``(x, y)``."""
        return x - self.x_hotspot, y - self.y_hotspot