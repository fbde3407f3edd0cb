import math

import pytest

from dimkit import (
    Angular2LineDimension,
    DimensionStyle,
    FitTextMove,
    StyleOverrideType,
    get_geometry_config,
)
from dimkit.geometry import vectors


def _corner(offset=1.0, **kwargs):
    return Angular2LineDimension((1.0, 0.0), (3.0, 0.0), (0.0, 1.0), (0.0, 3.0), offset, **kwargs)


def _state(dim):
    return (
        dim.first_line,
        dim.second_line,
        dim.offset,
        dim.arc_definition_point,
        dim.definition_point,
        dim.text_reference_point,
    )


def _assert_arc_invariant(dim):
    center = dim.center_point
    start_angle = vectors.angle(center, dim.end_first_line)
    expected = vectors.polar(center, dim.offset, start_angle + math.radians(dim.measurement) / 2)
    assert dim.arc_definition_point == pytest.approx(expected)
    assert math.isclose(vectors.distance(center, dim.arc_definition_point), dim.offset)
    assert dim.definition_point == dim.end_second_line


def test_position_at_diagonal_keeps_roles():
    dim = Angular2LineDimension((0.0, 0.0), (1.0, 0.0), (0.0, 0.0), (0.0, 1.0), 0.1)

    dim.set_dimension_line_position((1.0, 1.0))

    assert math.isclose(dim.offset, math.sqrt(2.0))
    assert dim.first_line == ((0.0, 0.0), (1.0, 0.0))
    assert dim.second_line == ((0.0, 0.0), (0.0, 1.0))
    assert dim.arc_definition_point == pytest.approx((1.0, 1.0))
    angle = math.degrees(vectors.angle(dim.center_point, dim.arc_definition_point))
    assert math.isclose(angle, 45.0)


def test_position_in_second_quadrant_swaps_lines():
    dim = Angular2LineDimension((0.0, 0.0), (1.0, 0.0), (0.0, 0.0), (0.0, 1.0), 0.1)

    dim.set_dimension_line_position((-1.0, 2.0))

    assert dim.first_line == ((0.0, 0.0), (0.0, 1.0))
    assert dim.second_line == ((1.0, 0.0), (0.0, 0.0))
    assert math.isclose(dim.offset, math.sqrt(5.0))
    assert math.isclose(dim.measurement, 90.0)
    assert dim.arc_definition_point == pytest.approx(vectors.polar((0.0, 0.0), math.sqrt(5.0), 0.75 * math.pi))


def test_negative_winding_is_swapped_first():
    dim = Angular2LineDimension((0.0, 1.0), (0.0, 3.0), (1.0, 0.0), (3.0, 0.0), 1.0)

    dim.set_dimension_line_position((2.0, 2.0))

    assert dim.first_line == ((1.0, 0.0), (3.0, 0.0))
    assert dim.second_line == ((0.0, 1.0), (0.0, 3.0))


@pytest.mark.parametrize('target', [(2.0, 1.0), (-1.0, 2.0), (-2.0, -1.0), (1.0, -3.0), (0.5, 4.0)])
def test_roles_put_target_between_first_and_second_direction(target):
    dim = _corner()

    dim.set_dimension_line_position(target)

    center = dim.center_point
    to_target = vectors.sub(target, center)
    assert vectors.cross(dim.first_line.direction, dim.second_line.direction) >= 0.0
    assert vectors.cross(dim.first_line.direction, to_target) > 0.0
    assert vectors.cross(dim.second_line.direction, to_target) < 0.0
    assert math.isclose(dim.offset, vectors.distance(center, target))
    _assert_arc_invariant(dim)


@pytest.mark.parametrize('target', [(2.0, 1.0), (-1.0, 2.0), (-2.0, -1.0), (1.0, -3.0)])
def test_set_dimension_line_position_is_idempotent(target):
    once = _corner()
    once.set_dimension_line_position(target)

    twice = _corner()
    twice.set_dimension_line_position(target)
    twice.set_dimension_line_position(target)

    assert _state(once) == _state(twice)


def test_target_on_center_clamps_offset_to_epsilon():
    dim = _corner()

    dim.set_dimension_line_position(dim.center_point)

    assert dim.offset == get_geometry_config().epsilon
    assert dim.offset > 0.0


def test_text_follows_arc_unless_placed_manually():
    dim = _corner(style=DimensionStyle(text_offset=0.5, fit_text_move=FitTextMove.OVER_DIM_LINE_WITH_LEADER))
    dim.set_dimension_line_position((3.0, 3.0))
    radius = math.hypot(3.0, 3.0) + 0.5
    assert dim.text_reference_point == pytest.approx((radius / math.sqrt(2.0), radius / math.sqrt(2.0)))

    dim.set_text_position((5.0, 5.0))
    dim.set_dimension_line_position((1.0, 1.0))

    assert dim.text_position_manually_set
    assert dim.text_reference_point == (5.0, 5.0)
    assert dim.arc_definition_point == pytest.approx((1.0, 1.0))


def test_manual_text_beside_dimension_line_drags_the_arc():
    dim = _corner()

    dim.set_text_position((2.0, 2.0))

    assert dim.text_reference_point == (2.0, 2.0)
    assert math.isclose(dim.offset, math.sqrt(8.0))
    assert dim.arc_definition_point == pytest.approx((2.0, 2.0))
    _assert_arc_invariant(dim)


def test_manual_text_with_override_policy_keeps_offset():
    dim = _corner()
    dim.style_overrides.set(StyleOverrideType.FIT_TEXT_MOVE, FitTextMove.OVER_DIM_LINE_WITHOUT_LEADER)

    dim.set_text_position((4.0, 4.0))

    assert dim.offset == 1.0
    assert dim.text_reference_point == (4.0, 4.0)
    assert dim.arc_definition_point == pytest.approx((math.sqrt(0.5), math.sqrt(0.5)))


def test_update_without_normalization_keeps_line_roles():
    dim = _corner()
    dim.set_text_position((-2.0, -2.0))

    assert dim.first_line == ((1.0, 0.0), (3.0, 0.0))
    assert dim.second_line == ((0.0, 1.0), (0.0, 3.0))
    assert math.isclose(dim.offset, math.sqrt(8.0))


def test_reset_text_position_recomputes_anchor():
    dim = _corner()
    dim.set_text_position((2.0, 2.0))

    dim.reset_text_position()

    assert not dim.text_position_manually_set
    radius = dim.offset + 0.6
    assert dim.text_reference_point == pytest.approx((radius / math.sqrt(2.0), radius / math.sqrt(2.0)))
