"""Running statistics for one game: score, accuracy, streaks and hit history."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class HitRecord:
    """One successful hit: its score, the plate's age and when it happened."""

    score: int
    time_to_hit: float
    timestamp: float = field(default_factory=time.monotonic)


class GameStatistics:
    """Tracks hits and misses as they happen and summarises them."""

    def __init__(self) -> None:
        self._total_score = 0
        self._total_hits = 0
        self._total_shots = 0
        self._current_streak = 0
        self._best_streak = 0
        self._hit_history: List[HitRecord] = []

    @property
    def total_score(self) -> int:
        return self._total_score

    @property
    def total_hits(self) -> int:
        return self._total_hits

    @property
    def total_shots(self) -> int:
        """Hits and misses together."""
        return self._total_shots

    @property
    def best_streak(self) -> int:
        """The longest run of consecutive hits."""
        return self._best_streak

    @property
    def hit_history(self) -> Tuple[HitRecord, ...]:
        return tuple(self._hit_history)

    def record_hit(self, score: int, time_to_hit: float) -> None:
        """Count a shot that hit, worth the given score."""
        self._total_shots += 1
        self._total_hits += 1
        self._total_score += score
        self._hit_history.append(HitRecord(score, time_to_hit))
        self._update_streak(True)

    def record_miss(self) -> None:
        """Count a shot that missed."""
        self._total_shots += 1
        self._update_streak(False)

    def accuracy(self) -> float:
        """Hits as a percentage of shots, or 0.0 before any shot."""
        if self._total_shots == 0:
            return 0.0
        return self._total_hits / self._total_shots * 100.0

    def average_time_to_hit(self) -> float:
        """Mean plate age at the moment of a hit, or 0.0 without hits."""
        if not self._hit_history:
            return 0.0
        return sum(r.time_to_hit for r in self._hit_history) / len(self._hit_history)

    def formatted_stats(self) -> str:
        """A multi-line summary for the end of the game."""
        return (
            f"Score:          {self._total_score}\n"
            f"Hits/Shots:     {self._total_hits} / {self._total_shots}\n"
            f"Accuracy:       {self.accuracy():.1f}%\n"
            f"Avg time to hit:{self.average_time_to_hit():.1f}s\n"
            f"Best streak:    {self._best_streak}"
        )

    def reset(self) -> None:
        """Forget everything recorded so far."""
        self._total_score = 0
        self._total_hits = 0
        self._total_shots = 0
        self._current_streak = 0
        self._best_streak = 0
        self._hit_history.clear()

    def _update_streak(self, is_hit: bool) -> None:
        if is_hit:
            self._current_streak += 1
            self._best_streak = max(self._best_streak, self._current_streak)
        else:
            self._current_streak = 0