"""The character grid the game is drawn on, and collision checks."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TextIO

from .config import GRID_COLUMNS, GRID_ROWS
from .entities import Entity, EntityType, Rocket

_U16 = 0x10000


@dataclass(frozen=True)
class HitInfo:
    """A rocket that struck a plate, and the plate's age at that moment."""

    plate: Entity
    rocket: Entity
    hit_time: float


@dataclass
class CheckHitsResult:
    hits: List[HitInfo] = field(default_factory=list)
    missed_rockets: int = 0


def intersects(first: Entity, second: Entity) -> bool:
    """True if the two entities' bounding boxes overlap."""
    bb1 = first.bounding_box()
    bb2 = second.bounding_box()
    if bb1.p2.x < bb2.p1.x or bb2.p2.x < bb1.p1.x:
        return False
    if bb1.p2.y < bb2.p1.y or bb2.p2.y < bb1.p1.y:
        return False
    return True


def is_off_screen(entity: Entity) -> bool:
    """True if a moving entity's exact position is outside the grid."""
    if entity.static:
        return False
    px, py = entity.trajectory.exact_position()
    return px < 0 or px >= GRID_COLUMNS or py < 0 or py >= GRID_ROWS


class Grid:
    """A pixel buffer of characters plus the entities that are drawn on it."""

    def __init__(self) -> None:
        self.rows = GRID_ROWS
        self.columns = GRID_COLUMNS
        self._cells = [[" "] * self.columns for _ in range(self.rows)]
        self._entities: List[Entity] = []

    @property
    def entities(self) -> tuple:
        """The entities in the order they were added."""
        return tuple(self._entities)

    def add_entity(self, entity: Entity) -> None:
        self._entities.append(entity)

    def draw_pixel(self, row: int, col: int, pixel: str) -> bool:
        """Set one cell; blanks and cells outside the grid are ignored."""
        # Coordinates are 16-bit unsigned values, so they wrap.
        row %= _U16
        col %= _U16
        if row < self.rows and col < self.columns and pixel != " ":
            self._cells[row][col] = pixel
            return True
        return False

    def _fill(self, pixel: str, rows: Optional[int] = None) -> None:
        for row in self._cells[: self.rows if rows is None else rows]:
            row[:] = [pixel] * self.columns

    def refresh(self) -> None:
        """Redraw background, ground and every entity into the buffer."""
        self._fill(" ")
        self._fill("_", rows=1)
        for entity in self._entities:
            entity.draw_on_grid(self)

    def _lines(self) -> Iterable[str]:
        for row in reversed(self._cells):
            yield "".join(row)

    def render(self) -> str:
        """The buffer as text, the top row first, each row ending in a newline."""
        return "".join(line + "\n" for line in self._lines())

    def draw(self, stream: Optional[TextIO] = None) -> None:
        """Write the rendered buffer to a stream, standard output by default."""
        out = sys.stdout if stream is None else stream
        out.write(self.render())
        out.flush()

    def check_hits(self) -> CheckHitsResult:
        """Find rocket-plate collisions and drop spent rockets and lost plates."""
        result = CheckHitsResult()
        rockets = [e for e in self._entities if e.entity_type is EntityType.ROCKET]
        plates = [e for e in self._entities if e.entity_type is EntityType.PLATE]

        to_remove = set()
        for rocket in rockets:
            if isinstance(rocket, Rocket) and rocket.is_expired():
                to_remove.add(id(rocket))
                result.missed_rockets += 1

        for plate in plates:
            if is_off_screen(plate):
                to_remove.add(id(plate))

        # Entities already marked are skipped so a rocket scores at most once.
        for rocket in rockets:
            if id(rocket) in to_remove:
                continue
            for plate in plates:
                if id(plate) in to_remove:
                    continue
                if intersects(rocket, plate):
                    result.hits.append(HitInfo(plate, rocket, plate.trajectory.elapsed()))
                    to_remove.add(id(rocket))
                    to_remove.add(id(plate))
                    break

        self._entities = [e for e in self._entities if id(e) not in to_remove]
        return result