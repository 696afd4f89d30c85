"""Things that live on the grid: the cannon, the pitcher, plates and rockets."""

from __future__ import annotations

import math
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Sequence

from .config import (
    CANNON_HEIGHT,
    CANNON_WIDTH,
    CANNON_X,
    CANNON_Y,
    GRID_COLUMNS,
    GRID_ROWS,
    PITCHER_HEIGHT,
    PITCHER_WIDTH,
    PITCHER_X_OFFSET,
    PLATE_HEIGHT,
    PLATE_SPAWN_X_OFFSET,
    PLATE_SPAWN_Y,
    PLATE_WIDTH,
    ROCKET_MAX_LIFETIME,
)
from .trajectory import Pos, Trajectory, Velocity

if TYPE_CHECKING:
    from .grid import Grid

Clock = Callable[[], float]

_U16_MASK = 0xFFFF


class EntityType(Enum):
    NONE = 0
    PITCHER = 1
    CANNON = 2
    PLATE = 3
    ROCKET = 4


@dataclass(frozen=True)
class BoundingBox:
    """The rectangle spanned by two corners, both inclusive."""

    p1: Pos
    p2: Pos


class Entity(ABC):
    """Something with a trajectory and a size that draws itself on a grid."""

    entity_type: EntityType = EntityType.NONE
    static: bool = False

    def __init__(self, trajectory: Trajectory, width: int = 0, height: int = 0) -> None:
        self.trajectory = trajectory
        self.width = width
        self.height = height

    def pos(self) -> Pos:
        """The current grid position."""
        if self.static:
            return self.trajectory.pos
        return self.trajectory.calculate_position()

    def bounding_box(self) -> BoundingBox:
        """The rectangle the entity occupies at its current position."""
        p = self.pos()
        far = Pos((p.x + self.width - 1) & _U16_MASK, (p.y + self.height - 1) & _U16_MASK)
        return BoundingBox(p, far)

    @abstractmethod
    def draw_on_grid(self, grid: Grid) -> None:
        """Draw the entity into the grid's pixel buffer."""

    def _draw_sprite(self, grid: Grid, sprite: Sequence[str]) -> None:
        """Draw rows of characters, the first row at the entity's own row."""
        p = self.pos()
        for dy, line in enumerate(sprite):
            for dx, pixel in enumerate(line):
                grid.draw_pixel(p.y + dy, p.x + dx, pixel)


class Cannon(Entity):
    """The fixed launcher the rockets start from."""

    entity_type = EntityType.CANNON
    static = True

    _SPRITE = ("|||", "[=]")

    def __init__(self, clock: Clock = time.monotonic) -> None:
        super().__init__(
            Trajectory(Pos(CANNON_X, CANNON_Y), clock=clock), CANNON_WIDTH, CANNON_HEIGHT
        )

    def draw_on_grid(self, grid: Grid) -> None:
        self._draw_sprite(grid, self._SPRITE)


class Pitcher(Entity):
    """The fixed figure on the right that throws the plates."""

    entity_type = EntityType.PITCHER
    static = True

    _SPRITE = (
        "|   |",
        "/ | \\",
        "  |  ",
        "/^|^\\",
        "  *  ",
    )

    def __init__(self, clock: Clock = time.monotonic) -> None:
        super().__init__(
            Trajectory(Pos(GRID_COLUMNS - PITCHER_X_OFFSET, CANNON_Y), clock=clock),
            PITCHER_WIDTH,
            PITCHER_HEIGHT,
        )

    def draw_on_grid(self, grid: Grid) -> None:
        self._draw_sprite(grid, self._SPRITE)


class Plate(Entity):
    """A target thrown from near the pitcher."""

    entity_type = EntityType.PLATE
    static = False

    _SPRITE = ("\\_/", "| |", "/^\\")

    def __init__(self, velocity: Velocity, clock: Clock = time.monotonic) -> None:
        super().__init__(
            Trajectory(
                Pos(GRID_COLUMNS - PLATE_SPAWN_X_OFFSET, PLATE_SPAWN_Y),
                Velocity(velocity.x, velocity.y),
                clock=clock,
            ),
            PLATE_WIDTH,
            PLATE_HEIGHT,
        )

    def draw_on_grid(self, grid: Grid) -> None:
        self._draw_sprite(grid, self._SPRITE)


class Rocket(Entity):
    """A one-pixel projectile fired from the cannon."""

    entity_type = EntityType.ROCKET
    static = False

    def __init__(self, angle: float, speed: float, clock: Clock = time.monotonic) -> None:
        velocity = Velocity(int(math.cos(angle) * speed), int(math.sin(angle) * speed))
        super().__init__(Trajectory(Pos(CANNON_X, CANNON_Y), velocity, clock=clock), 1, 1)

    def draw_on_grid(self, grid: Grid) -> None:
        p = self.pos()
        grid.draw_pixel(p.y, p.x, "*")

    def is_expired(self) -> bool:
        """True once the rocket has outlived its lifetime or left the grid."""
        if self.trajectory.elapsed() > ROCKET_MAX_LIFETIME:
            return True
        px, py = self.trajectory.exact_position()
        return px < 0 or px >= GRID_COLUMNS or py < 0 or py >= GRID_ROWS