import io
import math
import random

import pytest

from irondome.config import (
    CANNON_X,
    CANNON_Y,
    GAME_RUN_TIME_SEC,
    GRAVITY,
    PLATE_FIRE_POWER_RANGE,
    PLATE_MIN_FIRE_POWER,
    PLATE_SPAWN_INTERVAL_SEC,
    ROCKET_DEFAULT_ANGLE,
    ROCKET_SPEED,
    deg_to_rad,
)
from irondome.entities import Cannon, Pitcher, Plate, Rocket
from irondome.game import Game, intercept_angle
from irondome.trajectory import Pos, Trajectory, Velocity


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def game(clock):
    return Game(clock=clock, rng=random.Random(0))


def test_new_game_has_cannon_and_pitcher(game):
    kinds = [type(e) for e in game.grid.entities]
    assert kinds == [Cannon, Pitcher]
    assert (game.plates_fired, game.plates_hit, game.shots_fired) == (0, 0, 0)


def test_fire_without_plate_uses_default_angle(game, clock):
    rocket = game.fire_rocket()
    expected = Rocket(deg_to_rad(ROCKET_DEFAULT_ANGLE), ROCKET_SPEED, clock=clock)
    assert rocket.trajectory.velocity == expected.trajectory.velocity
    assert game.shots_fired == 1
    assert game.grid.entities[-1] is rocket


def test_fire_aims_at_oldest_plate(game, clock):
    first = game.spawn_plate()
    game.grid.add_entity(Plate(Velocity(-5, 10), clock=clock))
    rocket = game.fire_rocket()
    expected = Rocket(intercept_angle(first), ROCKET_SPEED, clock=clock)
    assert rocket.trajectory.velocity == expected.trajectory.velocity


def test_spawned_plate_flies_up_and_left(game):
    plate = game.spawn_plate()
    vel = plate.trajectory.velocity
    assert vel.x < 0 < vel.y
    speed = math.hypot(vel.x, vel.y)
    assert PLATE_MIN_FIRE_POWER - 2 <= speed <= PLATE_MIN_FIRE_POWER + PLATE_FIRE_POWER_RANGE
    assert plate in game.grid.entities


def test_intercept_path_meets_plate(clock):
    plate = Plate(Velocity(-20, 35), clock=clock)
    angle = intercept_angle(plate)
    best = float("inf")
    for step in range(3000):
        t = step / 1000
        clock.now = t
        rx = CANNON_X + ROCKET_SPEED * math.cos(angle) * t
        ry = CANNON_Y + ROCKET_SPEED * math.sin(angle) * t + 0.5 * GRAVITY * t * t
        px, py = plate.trajectory.exact_position()
        best = min(best, math.hypot(rx - px, ry - py))
    assert best < 1.0


def test_intercept_falls_back_to_current_position(clock):
    plate = Plate(Velocity(300, 0), clock=clock)
    p = plate.pos()
    assert intercept_angle(plate) == pytest.approx(math.atan2(p.y - CANNON_Y, p.x - CANNON_X))


def test_tick_records_expired_rocket_as_miss(game, clock):
    game.fire_rocket()
    clock.advance(11.0)
    result = game.tick()
    assert result.missed_rockets == 1
    assert game.statistics.total_shots == 1
    assert game.statistics.total_hits == 0
    assert not any(isinstance(e, Rocket) for e in game.grid.entities)


def test_tick_scores_a_hit(game, clock):
    plate = Plate(Velocity(0, 0), clock=clock)
    plate.trajectory = Trajectory(Pos(CANNON_X, CANNON_Y), clock=clock)
    game.grid.add_entity(plate)
    rocket = game.fire_rocket()
    expected = game.score_calculator.calculate_score(plate, rocket, 0.0)
    result = game.tick()
    assert len(result.hits) == 1
    assert game.plates_hit == 1
    assert game.statistics.total_hits == 1
    assert game.statistics.total_score == expected
    assert plate not in game.grid.entities


def test_play_runs_to_time_limit(clock):
    out = io.StringIO()
    game = Game(
        clock=clock,
        rng=random.Random(1),
        sleep=lambda _s: clock.advance(1.0),
        stdin=io.StringIO(""),
        stdout=out,
    )
    stats = game.play()
    text = out.getvalue()
    assert "\n=== Game Over ===\n" in text
    assert text.endswith(stats.formatted_stats() + "\n")
    assert game.plates_fired == GAME_RUN_TIME_SEC // PLATE_SPAWN_INTERVAL_SEC
    assert clock.now > GAME_RUN_TIME_SEC