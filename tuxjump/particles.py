"""Particle systems tiled over the level through a virtual rectangle.

Particles live in a rectangle of size ``(virtual_width, virtual_height)``
that repeats across the level; coordinates wrap modulo its size when
mapped to the screen.
"""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Sequence, Tuple

__all__ = ["Particle", "ParticleSystem", "SnowParticleSystem", "CloudParticleSystem"]

SNOW_IMAGES = (
    "/images/shared/snow0.png",
    "/images/shared/snow1.png",
    "/images/shared/snow2.png",
)
CLOUD_IMAGE = "/images/shared/cloud.png"
CLOUD_COUNT = 15
CLOUD_VIRTUAL_WIDTH = 2000.0


@dataclass
class Particle:
    """One particle: position, draw layer and texture with its size."""

    x: float
    y: float
    layer: int
    texture: Any
    width: int
    height: int
    speed: float = 0.0


class ParticleSystem(ABC):
    """A set of particles in a virtual rectangle the size of the screen."""

    def __init__(self, screen_width: int, screen_height: int) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.virtual_width = float(screen_width)
        self.virtual_height = float(screen_height)
        self.particles: List[Particle] = []

    def visible(
        self, scroll_x: float, scroll_y: float, layer: int
    ) -> Iterator[Tuple[Particle, float, float]]:
        """Yield ``(particle, x, y)`` screen positions of on-screen particles of ``layer``."""
        vw, vh = self.virtual_width, self.virtual_height
        sw, sh = self.screen_width, self.screen_height
        for particle in self.particles:
            if particle.layer != layer:
                continue
            x = math.fmod(particle.x - scroll_x, vw)
            if x < 0:
                x += vw
            y = math.fmod(particle.y - scroll_y, vh)
            if y < 0:
                y += vh
            xmax = math.fmod(x + particle.width, vw)
            ymax = math.fmod(y + particle.height, vh)
            if x >= sw and xmax >= sw:
                continue
            if y >= sh and ymax >= sh:
                continue
            if x > sw:
                x -= vw
            if y > sh:
                y -= vh
            yield particle, x, y

    @abstractmethod
    def simulate(self, elapsed_time: float) -> None:
        """Move the particles forward by ``elapsed_time``."""


class SnowParticleSystem(ParticleSystem):
    """Snowflakes of three sizes falling at a speed scaled by gravity."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        gravity: float,
        sizes: Sequence[Tuple[int, int]],
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(screen_width, screen_height)
        if len(sizes) != len(SNOW_IMAGES):
            raise ValueError(f"expected {len(SNOW_IMAGES)} snowflake sizes")
        self._rng = rng if rng is not None else random.Random()
        self.virtual_width = float(screen_width * 2)

        count = int(self.virtual_width / 10.0)
        for i in range(count):
            snowsize = self._rng.randrange(3)
            width, height = sizes[snowsize]
            speed = 0.0
            while speed < 0.01:
                speed = snowsize / 60.0 + self._rng.randrange(10) / 300.0
            self.particles.append(
                Particle(
                    x=float(self._rng.randrange(int(self.virtual_width))),
                    y=float(self._rng.randrange(screen_height)),
                    layer=i % 2,
                    texture=SNOW_IMAGES[snowsize],
                    width=width,
                    height=height,
                    speed=speed * gravity,
                )
            )

    def simulate(self, elapsed_time: float) -> None:
        for particle in self.particles:
            particle.y += particle.speed * elapsed_time
            if particle.y > self.screen_height:
                particle.y = math.fmod(particle.y, self.virtual_height)
                particle.x = float(self._rng.randrange(int(self.virtual_width)))


class CloudParticleSystem(ParticleSystem):
    """Clouds drifting slowly to the left."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        size: Tuple[int, int],
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(screen_width, screen_height)
        rng = rng if rng is not None else random.Random()
        self.virtual_width = CLOUD_VIRTUAL_WIDTH
        width, height = size
        for _ in range(CLOUD_COUNT):
            self.particles.append(
                Particle(
                    x=float(rng.randrange(int(self.virtual_width))),
                    y=float(rng.randrange(int(self.virtual_height))),
                    layer=0,
                    texture=CLOUD_IMAGE,
                    width=width,
                    height=height,
                    speed=-float(250 + rng.randrange(200)) / 1000.0,
                )
            )

    def simulate(self, elapsed_time: float) -> None:
        for particle in self.particles:
            particle.x += particle.speed * elapsed_time