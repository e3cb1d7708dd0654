import dataclasses
import math

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from scopetrace import AngledPoint, InvalidParameter, Point, Segment, normalize


def test_point_subtraction():
    assert Point(3.0, 4.0) - Point(1.0, 1.0) == Point(2.0, 3.0)


def test_point_is_frozen():
    p = Point(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0


def test_segment_delta_angle_and_length():
    s = Segment(Point(1.0, 1.0), Point(4.0, 5.0))
    assert s.delta() == Point(3.0, 4.0)
    assert s.length() == pytest.approx(5.0)
    assert s.angle() == pytest.approx(math.atan2(4.0, 3.0))


def test_segment_angle_pointing_back_along_axis():
    s = Segment(Point(10.0, 0.0), Point(0.0, 0.0))
    assert s.angle() == pytest.approx(math.pi)


def test_segment_as_array():
    s = Segment(Point(1.0, 2.0), Point(3.0, 4.0))
    assert_array_equal(s.as_array(), np.array([[1.0, 2.0], [3.0, 4.0]]))


def test_angled_point_keeps_position_and_angle():
    p = AngledPoint(1.0, 2.0, 0.5)
    assert p.point == Point(1.0, 2.0)
    assert_array_equal(p.as_array(), [1.0, 2.0, 0.5])
    assert p != Point(1.0, 2.0)


def test_normalize():
    v = normalize(np.array([3.0, 4.0]))
    assert np.linalg.norm(v) == pytest.approx(1.0)
    assert v[0] == pytest.approx(0.6)


def test_normalize_zero_vector_raises():
    with pytest.raises(InvalidParameter):
        normalize(np.zeros(2))
