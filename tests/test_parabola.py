import math

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from scopetrace import (
    InvalidParameter,
    Point,
    curve,
    curve_array,
    focal_point,
    surface_x,
    surface_x_array,
)


# =============================================================================
# surface_x
# =============================================================================

@pytest.mark.parametrize("y", [0.0, 0.5, 1.0, 3.5, -7.25, 100.0])
def test_surface_x_matches_parabola_exactly(focal_length, y):
    assert surface_x(focal_length, y) == y ** 2 / (4 * focal_length)


@pytest.mark.parametrize("y", [0.1, 1.0, 12.345, 99.9, 250.0])
def test_surface_x_is_symmetric(focal_length, y):
    assert surface_x(focal_length, y) == surface_x(focal_length, -y)


def test_surface_x_reference_value():
    assert surface_x(500, 100) == 5.0
    assert surface_x(250.0, 123.456) == pytest.approx(123.456 ** 2 / 1000.0)


@pytest.mark.parametrize("f", [0, 0.0, -500.0, math.inf, math.nan])
def test_surface_x_rejects_bad_focal_length(f):
    with pytest.raises(InvalidParameter):
        surface_x(f, 10.0)


def test_surface_x_zero_focal_length_is_an_invalid_parameter():
    with pytest.raises(ValueError):
        surface_x(0, 1.0)


def test_surface_x_rejects_nan_height(focal_length):
    with pytest.raises(InvalidParameter):
        surface_x(focal_length, math.nan)


def test_surface_x_array_matches_scalar(focal_length):
    ys = np.linspace(-100, 100, 41)
    expected = np.array([surface_x(focal_length, float(y)) for y in ys])
    assert_array_equal(surface_x_array(focal_length, ys), expected)


def test_surface_x_array_rejects_non_finite(focal_length):
    with pytest.raises(InvalidParameter):
        surface_x_array(focal_length, np.array([1.0, np.inf]))


def test_surface_x_rejects_overflowing_result():
    with pytest.raises(InvalidParameter, match="not finite"):
        surface_x(1e-300, 1e10)
    with pytest.raises(InvalidParameter, match="not finite"):
        surface_x_array(1e-300, np.array([1.0, 1e10]))


# =============================================================================
# curve
# =============================================================================

def test_curve_length_is_twice_radius(focal_length, radius):
    assert len(curve(radius, focal_length)) == 200
    assert len(curve(7, focal_length)) == 14


def test_curve_heights_start_at_minus_radius_and_increase(focal_length, radius):
    points = curve(radius, focal_length)
    ys = [p.y for p in points]
    assert ys[0] == -radius
    assert ys[-1] == radius - 1
    assert all(b > a for a, b in zip(ys, ys[1:]))


def test_curve_points_lie_on_parabola(focal_length, radius):
    for p in curve(radius, focal_length):
        assert p.x == surface_x(focal_length, p.y)


def test_curve_fractional_radius_rounds_up_step_count(focal_length):
    points = curve(2.5, focal_length)
    assert [p.y for p in points] == [-2.5, -1.5, -0.5, 0.5, 1.5]


def test_curve_is_restartable(focal_length, radius):
    assert curve(radius, focal_length) == curve(radius, focal_length)


def test_curve_contains_vertex(focal_length):
    assert Point(0.0, 0.0) in curve(10, focal_length)


@pytest.mark.parametrize("r", [0, -3.0])
def test_curve_rejects_non_positive_radius(focal_length, r):
    with pytest.raises(InvalidParameter):
        curve(r, focal_length)


def test_curve_rejects_zero_focal_length(radius):
    with pytest.raises(InvalidParameter):
        curve(radius, 0)


def test_curve_array_columns(focal_length, radius):
    samples = curve_array(radius, focal_length)
    assert samples.shape == (200, 2)
    assert_allclose(samples[:, 0], samples[:, 1] ** 2 / (4 * focal_length))


def test_curve_array_custom_step(focal_length):
    samples = curve_array(10, focal_length, step=0.5)
    assert samples.shape == (40, 2)
    with pytest.raises(InvalidParameter):
        curve_array(10, focal_length, step=0)


def test_focal_point(focal_length):
    assert focal_point(focal_length) == Point(500.0, 0.0)
