"""Interchangeable rules for how many points a hit is worth."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

from .config import GRID_COLUMNS, SCORE_BASE, SCORE_MAX_SPEED
from .entities import Plate, Rocket


class ScoringStrategy(ABC):
    """A rule that turns a hit into a score."""

    @abstractmethod
    def calculate_score(self, plate: Plate, rocket: Rocket, hit_time: float) -> int:
        """Points for hitting the plate with the rocket after hit_time seconds."""


class DistanceBasedStrategy(ScoringStrategy):
    """More points the farther the plate is from the origin."""

    def calculate_score(self, plate: Plate, rocket: Rocket, hit_time: float) -> int:
        pos = plate.pos()
        distance = math.sqrt(pos.x * pos.x + pos.y * pos.y)
        return int(SCORE_BASE * (distance / GRID_COLUMNS))


class SpeedBasedStrategy(ScoringStrategy):
    """More points for faster plates, capped at the base score."""

    def calculate_score(self, plate: Plate, rocket: Rocket, hit_time: float) -> int:
        vel = plate.trajectory.velocity
        speed = math.sqrt(vel.x * vel.x + vel.y * vel.y)
        return int(SCORE_BASE * min(speed / SCORE_MAX_SPEED, 1.0))


class TimeBasedStrategy(ScoringStrategy):
    """More points the sooner the plate is hit after it was thrown."""

    def calculate_score(self, plate: Plate, rocket: Rocket, hit_time: float) -> int:
        return int(SCORE_BASE * (1.0 / (hit_time + 1.0)))


class ScoreCalculator:
    """Scores hits with a replaceable strategy, distance-based by default."""

    def __init__(self, strategy: Optional[ScoringStrategy] = None) -> None:
        self.strategy: Optional[ScoringStrategy] = (
            strategy if strategy is not None else DistanceBasedStrategy()
        )

    def calculate_score(self, plate: Plate, rocket: Rocket, hit_time: float) -> int:
        """The current strategy's score, or 0 when no strategy is set."""
        if self.strategy is None:
            return 0
        return self.strategy.calculate_score(plate, rocket, hit_time)