"""A small physics model for accelerated and constant movement with gravity.

Velocities and accelerations are given in a frame where positive ``y``
points up; positions are in screen coordinates where ``y`` grows downward.
"""

from __future__ import annotations

from typing import Tuple

__all__ = ["Physic"]


class Physic:
    """Velocity, acceleration and optional gravity for one moving object."""

    def __init__(self) -> None:
        self._ax = 0.0
        self._ay = 0.0
        self._vx = 0.0
        self._vy = 0.0
        self.gravity_enabled = True

    def reset(self) -> None:
        """Zero all velocities and accelerations and turn gravity back on."""
        self._ax = self._ay = self._vx = self._vy = 0.0
        self.gravity_enabled = True

    def set_velocity(self, vx: float, vy: float) -> None:
        """Set both velocity components."""
        self._vx = vx
        self._vy = -vy

    def set_acceleration(self, ax: float, ay: float) -> None:
        """Set both acceleration components; gravity is added on top of ``ay``."""
        self._ax = ax
        self._ay = -ay

    def inverse_velocity_x(self) -> None:
        """Reverse the horizontal velocity."""
        self._vx = -self._vx

    def inverse_velocity_y(self) -> None:
        """Reverse the vertical velocity."""
        self._vy = -self._vy

    @property
    def velocity_x(self) -> float:
        return self._vx

    @velocity_x.setter
    def velocity_x(self, value: float) -> None:
        self._vx = value

    @property
    def velocity_y(self) -> float:
        return -self._vy

    @velocity_y.setter
    def velocity_y(self, value: float) -> None:
        self._vy = -value

    @property
    def acceleration_x(self) -> float:
        return self._ax

    @acceleration_x.setter
    def acceleration_x(self, value: float) -> None:
        self._ax = value

    @property
    def acceleration_y(self) -> float:
        return -self._ay

    @acceleration_y.setter
    def acceleration_y(self, value: float) -> None:
        self._ay = -value

    def enable_gravity(self, enabled: bool) -> None:
        """Turn the effect of gravity on or off."""
        self.gravity_enabled = bool(enabled)

    def apply(self, frame_ratio: float, x: float, y: float, gravity: float) -> Tuple[float, float]:
        """Advance one step and return the new ``(x, y)`` position.

        ``gravity`` is the level's gravity; it takes effect scaled by 1/100
        when gravity is enabled.
        """
        grav = gravity / 100.0 if self.gravity_enabled else 0.0
        ay = self._ay + grav
        x += self._vx * frame_ratio + self._ax * frame_ratio * frame_ratio
        y += self._vy * frame_ratio + ay * frame_ratio * frame_ratio
        self._vx += self._ax * frame_ratio
        self._vy += ay * frame_ratio
        return x, y