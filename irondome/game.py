"""The game loop: spawning plates, firing rockets, scoring and rendering."""

from __future__ import annotations

import math
import random
import sys
import threading
import time
from typing import Callable, Optional, TextIO

from .config import (
    CANNON_X,
    CANNON_Y,
    GAME_RUN_TIME_SEC,
    GAME_TICK_MS,
    GRAVITY,
    PLATE_FIRE_POWER_RANGE,
    PLATE_LAUNCH_ANGLE,
    PLATE_MIN_FIRE_POWER,
    PLATE_SPAWN_INTERVAL_SEC,
    RENDER_INTERVAL_MS,
    ROCKET_DEFAULT_ANGLE,
    ROCKET_SPEED,
    deg_to_rad,
)
from .entities import Cannon, Pitcher, Plate, Rocket
from .grid import CheckHitsResult, Grid
from .scoring import ScoreCalculator
from .statistics import GameStatistics
from .trajectory import Velocity

_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_EPSILON = 1e-6


def intercept_angle(plate: Plate) -> float:
    """The launch angle that sends a rocket from the cannon onto the plate.

    Gravity acts on both alike, so it cancels in their relative motion and
    the intercept time solves a quadratic. Without a positive solution the
    rocket is aimed at the plate's current position.
    """
    elapsed = plate.trajectory.elapsed()
    p = plate.pos()
    a_x = float(p.x) - CANNON_X
    b_vx = float(plate.trajectory.velocity.x)
    c_y = float(p.y) - CANNON_Y
    d_vy = plate.trajectory.velocity.y + GRAVITY * elapsed
    speed = ROCKET_SPEED

    qa = speed * speed - b_vx * b_vx - d_vy * d_vy
    qb = -2.0 * (a_x * b_vx + c_y * d_vy)
    qc = -(a_x * a_x + c_y * c_y)

    t = -1.0
    if abs(qa) < _EPSILON:
        if abs(qb) > _EPSILON:
            t = -qc / qb
    else:
        disc = qb * qb - 4 * qa * qc
        if disc >= 0:
            root = math.sqrt(disc)
            t1 = (-qb + root) / (2 * qa)
            t2 = (-qb - root) / (2 * qa)
            t = min(t1, t2) if t1 > 0 and t2 > 0 else max(t1, t2)

    if t > 0:
        return math.atan2(c_y / t + d_vy, a_x / t + b_vx)
    return math.atan2(c_y, a_x)


class Game:
    """One round of the game: a cannon, a pitcher, plates and rockets."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self._clock = clock
        self._rng = rng if rng is not None else random.Random()
        self._sleep = sleep
        self._stdin = stdin
        self._stdout = stdout

        self.grid = Grid()
        self.grid.add_entity(Cannon(clock=clock))
        self.grid.add_entity(Pitcher(clock=clock))

        self.score_calculator = ScoreCalculator()
        self.statistics = GameStatistics()

        self.plates_fired = 0
        self.plates_hit = 0
        self.shots_fired = 0

        self._shot_fired = threading.Event()
        self._active = threading.Event()

    def _listen(self, stream: TextIO) -> None:
        """Treat every line of input as a trigger pull."""
        for _ in stream:
            if not self._active.is_set():
                break
            self._shot_fired.set()

    def fire_rocket(self) -> Rocket:
        """Launch a rocket at the oldest plate, or at the default angle."""
        self.shots_fired += 1
        target = next((e for e in self.grid.entities if isinstance(e, Plate)), None)
        if target is not None:
            angle = intercept_angle(target)
        else:
            angle = deg_to_rad(ROCKET_DEFAULT_ANGLE)
        rocket = Rocket(angle, ROCKET_SPEED, clock=self._clock)
        self.grid.add_entity(rocket)
        return rocket

    def spawn_plate(self) -> Plate:
        """Throw a new plate with a random fire power."""
        fire_power = self._rng.randrange(PLATE_FIRE_POWER_RANGE) + PLATE_MIN_FIRE_POWER
        angle = deg_to_rad(PLATE_LAUNCH_ANGLE)
        velocity = Velocity(int(math.cos(angle) * fire_power), int(math.sin(angle) * fire_power))
        plate = Plate(velocity, clock=self._clock)
        self.grid.add_entity(plate)
        return plate

    def tick(self) -> CheckHitsResult:
        """Resolve collisions and record the hits and misses they produce."""
        result = self.grid.check_hits()
        self.plates_hit += len(result.hits)
        for hit in result.hits:
            if isinstance(hit.plate, Plate) and isinstance(hit.rocket, Rocket):
                score = self.score_calculator.calculate_score(hit.plate, hit.rocket, hit.hit_time)
                self.statistics.record_hit(score, hit.hit_time)
        for _ in range(result.missed_rockets):
            self.statistics.record_miss()
        return result

    def play(self) -> GameStatistics:
        """Run the game until its time is up, then print the summary."""
        out = self._stdout if self._stdout is not None else sys.stdout
        inp = self._stdin if self._stdin is not None else sys.stdin

        self._active.set()
        t0 = self._clock()
        listener = threading.Thread(target=self._listen, args=(inp,), daemon=True)
        listener.start()

        last_refreshed = self._clock()
        while self._active.is_set():
            if self._shot_fired.is_set():
                self._shot_fired.clear()
                self.fire_rocket()

            if int((self._clock() - last_refreshed) * 1000) > RENDER_INTERVAL_MS:
                out.write(_CLEAR_SCREEN)
                self.grid.refresh()
                self.grid.draw(out)
                last_refreshed = self._clock()

            self.tick()
            self._sleep(GAME_TICK_MS / 1000)

            game_time = int(self._clock() - t0)
            if game_time > GAME_RUN_TIME_SEC:
                self._active.clear()
            elif game_time // PLATE_SPAWN_INTERVAL_SEC > self.plates_fired:
                self.spawn_plate()
                self.plates_fired += 1

        out.write("\n=== Game Over ===\n")
        out.write(self.statistics.formatted_stats() + "\n")
        out.flush()
        return self.statistics


def main(argv: Optional[list] = None) -> int:
    """Play one game on the terminal."""
    Game().play()
    return 0