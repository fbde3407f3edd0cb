import math

import pytest

from dimkit.errors import InvalidArgumentError
from dimkit.geometry import vectors


def test_find_intersection_of_crossing_lines():
    point = vectors.find_intersection((0.0, 0.0), (1.0, 0.0), (2.0, -1.0), (0.0, 1.0))
    assert point == pytest.approx((2.0, 0.0))


def test_find_intersection_of_parallel_lines_is_none():
    assert vectors.find_intersection((0.0, 0.0), (1.0, 1.0), (0.0, 1.0), (-2.0, -2.0)) is None


@pytest.mark.parametrize(
    'u, v, expected',
    [
        ((1.0, 0.0), (-2.0, 0.0), True),
        ((1.0, 0.0), (0.0, 0.0), True),
        ((3.0, 3.0), (1.0, 1.0), True),
        ((1.0, 0.0), (1.0, 1e-3), False),
        ((1.0, 0.0), (0.0, 1.0), False),
    ],
)
def test_are_parallel(u, v, expected):
    assert vectors.are_parallel(u, v) is expected


def test_are_parallel_does_not_depend_on_length():
    assert not vectors.are_parallel((1e-4, 0.0), (0.0, 1e-4))


def test_angle_between_is_unsigned():
    assert math.isclose(vectors.angle_between((1.0, 0.0), (1.0, 1.0)), math.pi / 4)
    assert math.isclose(vectors.angle_between((1.0, 0.0), (1.0, -1.0)), math.pi / 4)
    assert math.isclose(vectors.angle_between((1.0, 0.0), (-3.0, 0.0)), math.pi)
    assert vectors.angle_between((2.0, 0.0), (5.0, 0.0)) == 0.0


def test_angle_is_in_zero_two_pi():
    assert math.isclose(vectors.angle((0.0, 0.0), (0.0, -1.0)), 1.5 * math.pi)
    assert math.isclose(vectors.angle((1.0, 1.0), (0.0, 2.0)), 0.75 * math.pi)
    assert vectors.angle((1.0, 1.0), (2.0, 1.0)) == 0.0


def test_polar_and_distance():
    point = vectors.polar((1.0, 1.0), 2.0, math.pi / 2)
    assert point == pytest.approx((1.0, 3.0))
    assert math.isclose(vectors.distance((1.0, 1.0), point), 2.0)


def test_cross_sign_follows_turn_direction():
    assert vectors.cross((1.0, 0.0), (0.0, 1.0)) > 0.0
    assert vectors.cross((0.0, 1.0), (1.0, 0.0)) < 0.0


def test_normalize_keeps_zero_vector():
    assert vectors.normalize((0.0, 0.0)) == (0.0, 0.0)
    assert vectors.normalize((3.0, 4.0)) == pytest.approx((0.6, 0.8))


def test_swap_returns_pair_in_reverse_order():
    a, b = vectors.swap((1.0, 2.0), (3.0, 4.0))
    assert a == (3.0, 4.0)
    assert b == (1.0, 2.0)


def test_as_point_rejects_wrong_arity():
    with pytest.raises(InvalidArgumentError):
        vectors.as_point((1.0, 2.0, 3.0))
