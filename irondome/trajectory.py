"""Positions, velocities and ballistic trajectories."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .config import GRAVITY

_U16 = 0x10000


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


@dataclass(frozen=True)
class Pos:
    """A grid position: x is the column, y is the row counted from the ground."""

    x: int
    y: int


@dataclass(frozen=True)
class Velocity:
    """A velocity in pixels per second."""

    x: int = 0
    y: int = 0


@dataclass
class Trajectory:
    """Motion under gravity from an initial position, velocity and start time."""

    pos: Pos
    velocity: Velocity = field(default_factory=Velocity)
    clock: Callable[[], float] = time.monotonic
    t0: Optional[float] = None

    def __post_init__(self) -> None:
        if self.t0 is None:
            self.t0 = self.clock()

    def elapsed(self) -> float:
        """Seconds since the trajectory started."""
        return self.clock() - self.t0

    def exact_position(self) -> tuple[float, float]:
        """The unrounded (x, y) position at the current time."""
        t = self.elapsed()
        px = self.pos.x + self.velocity.x * t
        py = self.pos.y + self.velocity.y * t + 0.5 * GRAVITY * t * t
        return px, py

    def calculate_position(self) -> Pos:
        """The current position rounded to the grid, as 16-bit unsigned coordinates.

        Positions below zero wrap around and so land far outside the grid.
        """
        px, py = self.exact_position()
        return Pos(_round_half_away(px) % _U16, _round_half_away(py) % _U16)