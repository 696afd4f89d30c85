import math

import pytest

from irondome.config import deg_to_rad


def test_zero_degrees_is_zero_radians():
    assert deg_to_rad(0) == 0


def test_half_turn_is_close_to_pi():
    assert deg_to_rad(180) == pytest.approx(math.pi, abs=1e-4)


@pytest.mark.parametrize("degrees", [30, 60, 90, 120, 270])
def test_matches_standard_conversion(degrees):
    assert deg_to_rad(degrees) == pytest.approx(math.radians(degrees), rel=1e-5)


def test_conversion_is_linear():
    assert deg_to_rad(120) == pytest.approx(2 * deg_to_rad(60))
    assert deg_to_rad(-45) == pytest.approx(-deg_to_rad(45))