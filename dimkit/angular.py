"""Angular dimension measured between two reference lines.

All points are stored in the object coordinate system (OCS) of the entity,
the plane defined by ``normal`` and ``elevation``.  The angle is always
measured from the direction of the first line to the direction of the second
one; :meth:`Angular2LineDimension.set_dimension_line_position` reorders and
flips the lines so that this arc passes through the picked point.
"""

from __future__ import annotations

import copy
import logging
import math
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .config import GeometryConfig, get_block_builder, get_geometry_config
from .dimension import BlockBuilder, DimensionType
from .entities import Line
from .errors import DimensionError, InvalidArgumentError, InvalidGeometryError, OutOfRangeError
from .geometry import vectors
from .geometry.ocs import (
    UNIT_Z,
    Vector3,
    arbitrary_axis,
    are_parallel3,
    is_zero_vector,
    normalize3,
    ocs_to_world,
    transform_point,
    world_to_ocs,
)
from .geometry.vectors import Point2, Vector2, as_point
from .logging_utils import debug_log_call
from .style import DimensionStyle, FitTextMove, StyleOverrides, StyleOverrideType

logger = logging.getLogger(__name__)

XData = Dict[str, List[Tuple[int, Any]]]

_DEFAULT_STYLE: Any = object()


class LineRef(NamedTuple):
    """Reference line of the dimension, as two OCS points."""

    start: Point2
    end: Point2

    @property
    def direction(self) -> Vector2:
        return vectors.sub(self.end, self.start)

    def reversed(self) -> "LineRef":
        return LineRef(self.end, self.start)


def _parallel_error() -> InvalidGeometryError:
    return InvalidGeometryError("The two lines that define the dimension are parallel.")


def _check_offset(value: float) -> float:
    value = float(value)
    if value < 0.0:
        raise OutOfRangeError("The offset value must be equal or greater than zero.")
    return value


class Angular2LineDimension:
    """Angular dimension defined by two non parallel lines.

    ``offset`` is the radius of the dimension arc around the intersection of
    the two lines.  ``definition_point`` follows the end of the second line,
    ``arc_definition_point`` sits halfway along the arc and
    ``text_reference_point`` is pushed outwards from it by the style text gap
    unless the text was placed by hand.
    """

    dimension_type = DimensionType.ANGULAR

    def __init__(
        self,
        start_first_line: Sequence[float] = (0.0, 0.0),
        end_first_line: Sequence[float] = (1.0, 0.0),
        start_second_line: Sequence[float] = (0.0, 0.0),
        end_second_line: Sequence[float] = (0.0, 1.0),
        offset: float = 0.1,
        style: Optional[DimensionStyle] = _DEFAULT_STYLE,
        *,
        normal: Sequence[float] = UNIT_Z,
        elevation: float = 0.0,
    ) -> None:
        endpoints = (start_first_line, end_first_line, start_second_line, end_second_line)
        if any(point is None for point in endpoints):
            raise InvalidArgumentError("The reference line points cannot be None.")
        if style is None:
            raise InvalidArgumentError("The dimension style cannot be None.")

        first_line = LineRef(as_point(start_first_line), as_point(end_first_line))
        second_line = LineRef(as_point(start_second_line), as_point(end_second_line))
        config = get_geometry_config()
        if vectors.are_parallel(first_line.direction, second_line.direction, config.parallel_threshold):
            raise _parallel_error()

        self._first_line = first_line
        self._second_line = second_line
        self._offset = _check_offset(offset)
        self._style: DimensionStyle = DimensionStyle.default() if style is _DEFAULT_STYLE else style
        self._normal: Vector3 = normalize3(normal)
        self.elevation = float(elevation)

        self._arc_definition_point: Point2 = (0.0, 0.0)
        self._definition_point: Point2 = second_line.end
        self._text_reference_point: Point2 = (0.0, 0.0)
        self.text_position_manually_set = False
        self.user_text: Optional[str] = None
        self.style_overrides = StyleOverrides()
        self.xdata: XData = {}

        self.update()

    @classmethod
    def from_lines(
        cls,
        first_line: Line,
        second_line: Line,
        offset: float = 0.1,
        normal: Sequence[float] = UNIT_Z,
        style: Optional[DimensionStyle] = _DEFAULT_STYLE,
    ) -> "Angular2LineDimension":
        """Build the dimension from two world space lines.

        The line end points are projected onto the plane defined by ``normal``;
        the elevation is taken from the start of the first line.
        """

        if first_line is None:
            raise InvalidArgumentError("first_line cannot be None.")
        if second_line is None:
            raise InvalidArgumentError("second_line cannot be None.")
        config = get_geometry_config()
        if are_parallel3(first_line.direction, second_line.direction, config.parallel_threshold):
            raise _parallel_error()

        ocs_points = world_to_ocs(
            [first_line.start, first_line.end, second_line.start, second_line.end],
            normal,
        )
        return cls(
            ocs_points[0][:2],
            ocs_points[1][:2],
            ocs_points[2][:2],
            ocs_points[3][:2],
            offset,
            style,
            normal=normal,
            elevation=ocs_points[0][2],
        )

    # -- reference lines ---------------------------------------------------

    @property
    def first_line(self) -> LineRef:
        return self._first_line

    @first_line.setter
    def first_line(self, value: Tuple[Sequence[float], Sequence[float]]) -> None:
        self._first_line = LineRef(as_point(value[0]), as_point(value[1]))

    @property
    def second_line(self) -> LineRef:
        return self._second_line

    @second_line.setter
    def second_line(self, value: Tuple[Sequence[float], Sequence[float]]) -> None:
        self._second_line = LineRef(as_point(value[0]), as_point(value[1]))

    @property
    def start_first_line(self) -> Point2:
        return self._first_line.start

    @start_first_line.setter
    def start_first_line(self, value: Sequence[float]) -> None:
        self._first_line = self._first_line._replace(start=as_point(value))

    @property
    def end_first_line(self) -> Point2:
        return self._first_line.end

    @end_first_line.setter
    def end_first_line(self, value: Sequence[float]) -> None:
        self._first_line = self._first_line._replace(end=as_point(value))

    @property
    def start_second_line(self) -> Point2:
        return self._second_line.start

    @start_second_line.setter
    def start_second_line(self, value: Sequence[float]) -> None:
        self._second_line = self._second_line._replace(start=as_point(value))

    @property
    def end_second_line(self) -> Point2:
        return self._second_line.end

    @end_second_line.setter
    def end_second_line(self, value: Sequence[float]) -> None:
        self._second_line = self._second_line._replace(end=as_point(value))

    # -- derived values ------------------------------------------------------

    @property
    def center_point(self) -> Point2:
        """Intersection of the two reference lines, in OCS."""

        config = get_geometry_config()
        center = vectors.find_intersection(
            self._first_line.start,
            self._first_line.direction,
            self._second_line.start,
            self._second_line.direction,
            config.parallel_threshold,
        )
        if center is None:
            raise _parallel_error()
        return center

    @property
    def measurement(self) -> float:
        """Angle between the two line directions in degrees, always in the OCS plane."""

        return math.degrees(vectors.angle_between(self._first_line.direction, self._second_line.direction))

    @property
    def offset(self) -> float:
        return self._offset

    @offset.setter
    def offset(self, value: float) -> None:
        self._offset = _check_offset(value)
        config = get_geometry_config()
        if not vectors.are_parallel(
            self._first_line.direction, self._second_line.direction, config.parallel_threshold
        ):
            self._place_reference_points(self.center_point)

    @property
    def arc_definition_point(self) -> Point2:
        return self._arc_definition_point

    @property
    def definition_point(self) -> Point2:
        return self._definition_point

    @property
    def text_reference_point(self) -> Point2:
        return self._text_reference_point

    @property
    def normal(self) -> Vector3:
        return self._normal

    @normal.setter
    def normal(self, value: Sequence[float]) -> None:
        self._normal = normalize3(value)

    @property
    def style(self) -> DimensionStyle:
        return self._style

    @style.setter
    def style(self, value: DimensionStyle) -> None:
        if value is None:
            raise InvalidArgumentError("The dimension style cannot be None.")
        self._style = value

    # -- text placement ------------------------------------------------------

    def set_text_position(self, point: Sequence[float]) -> None:
        """Pin the text at ``point``; later recalculations will not move it."""

        self._text_reference_point = as_point(point)
        self.text_position_manually_set = True
        self.update()

    def reset_text_position(self) -> None:
        self.text_position_manually_set = False
        self.update()

    # -- position solver -----------------------------------------------------

    @debug_log_call(logger)
    def set_dimension_line_position(self, point: Sequence[float]) -> None:
        """Place the dimension arc so that it passes through ``point``.

        The start and end points of the reference lines may be swapped or
        reversed; the measurement always goes from the direction of the first
        line to the direction of the second one.
        """

        self._set_dimension_line_position(as_point(point), normalize=True)

    def _set_dimension_line_position(self, point: Point2, *, normalize: bool) -> None:
        config = get_geometry_config()
        self._check_not_parallel(config)
        center = self.center_point

        if normalize:
            self._normalize_line_roles(point, center)

        new_offset = vectors.distance(center, point)
        self._offset = config.epsilon if vectors.is_zero(new_offset, config.epsilon) else new_offset
        self._place_reference_points(center)

    def _normalize_line_roles(self, point: Point2, center: Point2) -> None:
        if vectors.cross(self._first_line.direction, self._second_line.direction) < 0.0:
            self._first_line, self._second_line = vectors.swap(self._first_line, self._second_line)

        ref1 = self._first_line
        ref2 = self._second_line
        dir_offset = vectors.sub(point, center)
        cross_start = vectors.cross(ref1.direction, dir_offset)
        cross_end = vectors.cross(ref2.direction, dir_offset)

        if cross_start >= 0.0 and cross_end >= 0.0:
            first, second = ref2, ref1.reversed()
        elif cross_start < 0.0 and cross_end >= 0.0:
            first, second = ref1.reversed(), ref2.reversed()
        elif cross_start < 0.0 and cross_end < 0.0:
            first, second = ref2.reversed(), ref1
        else:
            return

        logger.debug(
            "Reassigned reference lines for cross signs (%.3g, %.3g): %s, %s",
            cross_start,
            cross_end,
            first,
            second,
        )
        self._first_line = first
        self._second_line = second

    # -- reference point recalculation -----------------------------------------

    @debug_log_call(logger)
    def update(self) -> None:
        """Recalculate the definition, arc and text points from the current lines."""

        config = get_geometry_config()
        self._check_not_parallel(config)
        center = self.center_point

        if self.text_position_manually_set:
            move_text = self.style_overrides.resolve(StyleOverrideType.FIT_TEXT_MOVE, self._style)
            if move_text == FitTextMove.BESIDE_DIM_LINE:
                self._set_dimension_line_position(self._text_reference_point, normalize=False)
                return

        self._place_reference_points(center)

    def _place_reference_points(self, center: Point2) -> None:
        self._definition_point = self._second_line.end

        start_angle = vectors.angle(center, self._first_line.end)
        mid_rotation = start_angle + math.radians(self.measurement) * 0.5
        arc_point = vectors.polar(center, self._offset, mid_rotation)
        self._arc_definition_point = arc_point

        if not self.text_position_manually_set:
            text_gap = self.style_overrides.resolve(StyleOverrideType.TEXT_OFFSET, self._style)
            dim_scale = self.style_overrides.resolve(StyleOverrideType.DIM_SCALE_OVERALL, self._style)
            gap = float(text_gap) * float(dim_scale)
            outward = vectors.normalize(vectors.sub(arc_point, center))
            self._text_reference_point = vectors.add(arc_point, vectors.scale(outward, gap))

    def _check_not_parallel(self, config: GeometryConfig) -> None:
        if vectors.are_parallel(
            self._first_line.direction, self._second_line.direction, config.parallel_threshold
        ):
            raise _parallel_error()

    # -- transformation ------------------------------------------------------

    @debug_log_call(logger)
    def transform_by(self, transformation: Sequence[Sequence[float]], translation: Sequence[float]) -> None:
        """Move, scale and/or rotate the dimension.

        ``transformation`` is a 3x3 matrix acting on column vectors.  Non uniform
        scaling local to the dimension is not supported.  When the transformed
        reference lines end up parallel an :class:`InvalidGeometryError` is
        raised and the dimension keeps its previous state.
        """

        matrix = np.asarray(transformation, dtype=float)
        if matrix.shape != (3, 3):
            raise InvalidArgumentError(f"transformation must be a 3x3 matrix, got shape {matrix.shape}")
        offset_vec = np.asarray(translation, dtype=float)
        if offset_vec.shape != (3,):
            raise InvalidArgumentError(f"translation must be a 3D vector, got shape {offset_vec.shape}")

        config = get_geometry_config()
        new_normal = matrix @ np.asarray(self._normal, dtype=float)
        if is_zero_vector(new_normal, config.epsilon):
            new_normal = np.asarray(self._normal, dtype=float)
        target_normal = normalize3(new_normal)

        source_basis = arbitrary_axis(self._normal)
        target_basis_inv = arbitrary_axis(target_normal).T

        def move(point: Point2) -> Tuple[Point2, float]:
            return transform_point(point, self.elevation, source_basis, matrix, offset_vec, target_basis_inv)

        start1, new_elevation = move(self._first_line.start)
        end1, _ = move(self._first_line.end)
        start2, _ = move(self._second_line.start)
        end2, _ = move(self._second_line.end)
        first_line = LineRef(start1, end1)
        second_line = LineRef(start2, end2)

        if vectors.are_parallel(first_line.direction, second_line.direction, config.parallel_threshold):
            logger.warning(
                "Rejected transformation of angular dimension: reference lines %s and %s would be parallel",
                first_line,
                second_line,
            )
            raise InvalidGeometryError(
                "The transformation cannot be applied, the resulting reference lines are parallel."
            )

        arc_point, _ = move(self._arc_definition_point)
        text_point = self._text_reference_point
        if self.text_position_manually_set:
            text_point, _ = move(self._text_reference_point)
        definition_point, _ = move(self._definition_point)

        self._first_line = first_line
        self._second_line = second_line
        self._arc_definition_point = arc_point
        self._text_reference_point = text_point
        self._definition_point = definition_point
        self.elevation = new_elevation
        self._normal = target_normal

        self._set_dimension_line_position(arc_point, normalize=True)

    def world_points(self) -> Dict[str, Vector3]:
        """Return the stored OCS points lifted to world coordinates."""

        names = (
            "start_first_line",
            "end_first_line",
            "start_second_line",
            "end_second_line",
            "arc_definition_point",
            "text_reference_point",
            "definition_point",
        )
        local = [(*getattr(self, name), self.elevation) for name in names]
        return dict(zip(names, ocs_to_world(local, self._normal)))

    # -- copy and rendering ----------------------------------------------------

    def clone(self) -> "Angular2LineDimension":
        duplicate = Angular2LineDimension(style=self._style.clone())
        duplicate._first_line = self._first_line
        duplicate._second_line = self._second_line
        duplicate._offset = self._offset
        duplicate._arc_definition_point = self._arc_definition_point
        duplicate._definition_point = self._definition_point
        duplicate._text_reference_point = self._text_reference_point
        duplicate.text_position_manually_set = self.text_position_manually_set
        duplicate._normal = self._normal
        duplicate.elevation = self.elevation
        duplicate.user_text = self.user_text
        duplicate.style_overrides = self.style_overrides.copy()
        duplicate.xdata = copy.deepcopy(self.xdata)
        return duplicate

    def build_block(self, name: str, builder: Optional[BlockBuilder] = None) -> Any:
        """Delegate the creation of the dimension picture to ``builder``.

        Falls back to the builder registered with :func:`dimkit.config.set_block_builder`.
        """

        if not name:
            raise InvalidArgumentError("The block name cannot be empty.")
        builder = builder or get_block_builder()
        if builder is None:
            raise DimensionError("No block builder is available for the angular dimension.")
        return builder(self, name)

    def __repr__(self) -> str:
        return (
            f"Angular2LineDimension(first_line={tuple(self._first_line)!r}, "
            f"second_line={tuple(self._second_line)!r}, offset={self._offset!r}, "
            f"normal={self._normal!r}, elevation={self.elevation!r})"
        )


__all__ = ["Angular2LineDimension", "LineRef", "XData"]
