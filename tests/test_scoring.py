import pytest

from irondome.config import SCORE_BASE
from irondome.entities import Plate, Rocket
from irondome.scoring import (
    DistanceBasedStrategy,
    ScoreCalculator,
    ScoringStrategy,
    SpeedBasedStrategy,
    TimeBasedStrategy,
)
from irondome.trajectory import Velocity


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def make_pair(clock, velocity=Velocity(0, 0)):
    return Plate(velocity, clock=clock), Rocket(0.0, 100.0, clock=clock)


def test_strategy_base_is_abstract():
    with pytest.raises(TypeError):
        ScoringStrategy()


def test_time_based_immediate_hit_gets_base_score(clock):
    plate, rocket = make_pair(clock)
    assert TimeBasedStrategy().calculate_score(plate, rocket, 0.0) == SCORE_BASE


def test_time_based_halves_after_one_second(clock):
    plate, rocket = make_pair(clock)
    assert TimeBasedStrategy().calculate_score(plate, rocket, 1.0) == 50


def test_time_based_decreases_with_time(clock):
    plate, rocket = make_pair(clock)
    strategy = TimeBasedStrategy()
    scores = [strategy.calculate_score(plate, rocket, t) for t in (0.0, 0.5, 2.0, 10.0)]
    assert scores == sorted(scores, reverse=True)


def test_speed_based_at_max_speed(clock):
    plate, rocket = make_pair(clock, Velocity(30, 40))
    assert SpeedBasedStrategy().calculate_score(plate, rocket, 0.0) == SCORE_BASE


def test_speed_based_is_capped(clock):
    plate, rocket = make_pair(clock, Velocity(300, 400))
    assert SpeedBasedStrategy().calculate_score(plate, rocket, 0.0) == SCORE_BASE


def test_speed_based_still_plate_scores_nothing(clock):
    plate, rocket = make_pair(clock, Velocity(0, 0))
    assert SpeedBasedStrategy().calculate_score(plate, rocket, 0.0) == 0


def test_distance_based_within_bounds(clock):
    plate, rocket = make_pair(clock)
    score = DistanceBasedStrategy().calculate_score(plate, rocket, 0.0)
    assert 0 < score < SCORE_BASE


def test_distance_based_rewards_distance(clock):
    plate, rocket = make_pair(clock, Velocity(-50, 0))
    strategy = DistanceBasedStrategy()
    near_start = strategy.calculate_score(plate, rocket, 0.0)
    clock.now = 1.0
    later = strategy.calculate_score(plate, rocket, 1.0)
    assert later < near_start


def test_calculator_defaults_to_distance(clock):
    plate, rocket = make_pair(clock)
    expected = DistanceBasedStrategy().calculate_score(plate, rocket, 0.0)
    assert ScoreCalculator().calculate_score(plate, rocket, 0.0) == expected


def test_calculator_uses_replaced_strategy(clock):
    plate, rocket = make_pair(clock)
    calculator = ScoreCalculator()
    calculator.strategy = TimeBasedStrategy()
    assert calculator.calculate_score(plate, rocket, 0.0) == SCORE_BASE


def test_calculator_without_strategy_scores_zero(clock):
    plate, rocket = make_pair(clock, Velocity(30, 40))
    calculator = ScoreCalculator(SpeedBasedStrategy())
    calculator.strategy = None
    assert calculator.calculate_score(plate, rocket, 0.0) == 0