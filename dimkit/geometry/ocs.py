"""Object coordinate systems (OCS) defined by a plane normal.

Matrices follow the column-vector convention: ``basis @ p`` maps a point
expressed in the object coordinate system to world coordinates.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from ..errors import InvalidArgumentError
from .vectors import EPSILON, Point2

Vector3 = Tuple[float, float, float]

UNIT_Z: Vector3 = (0.0, 0.0, 1.0)

_ARBITRARY_AXIS_LIMIT = 1.0 / 64.0
_WORLD_Y = np.array([0.0, 1.0, 0.0], dtype=float)
_WORLD_Z = np.array([0.0, 0.0, 1.0], dtype=float)


def as_vector3(value: Sequence[float]) -> Vector3:
    if len(value) == 2:
        return (float(value[0]), float(value[1]), 0.0)
    if len(value) != 3:
        raise InvalidArgumentError(f"expected a 3D vector, got {len(value)} components")
    return (float(value[0]), float(value[1]), float(value[2]))


def is_zero_vector(value: Sequence[float], threshold: float = EPSILON) -> bool:
    return float(np.linalg.norm(np.asarray(value, dtype=float))) <= threshold


def normalize3(value: Sequence[float]) -> Vector3:
    vec = np.asarray(value, dtype=float)
    length = float(np.linalg.norm(vec))
    if length <= EPSILON:
        raise InvalidArgumentError("cannot normalize a zero length vector")
    unit = vec / length
    return (float(unit[0]), float(unit[1]), float(unit[2]))


def are_parallel3(u: Sequence[float], v: Sequence[float], threshold: float = EPSILON) -> bool:
    a = np.asarray(u, dtype=float)
    b = np.asarray(v, dtype=float)
    len_a = float(np.linalg.norm(a))
    len_b = float(np.linalg.norm(b))
    if len_a <= EPSILON or len_b <= EPSILON:
        return True
    return float(np.linalg.norm(np.cross(a / len_a, b / len_b))) <= threshold


def arbitrary_axis(normal: Sequence[float]) -> np.ndarray:
    """Return the OCS to WCS rotation for the plane with the given ``normal``.

    Uses the DXF arbitrary axis algorithm; the columns of the result are the
    local X axis, the local Y axis and the unit normal.
    """

    z_axis = np.asarray(normalize3(normal), dtype=float)
    if abs(z_axis[0]) < _ARBITRARY_AXIS_LIMIT and abs(z_axis[1]) < _ARBITRARY_AXIS_LIMIT:
        x_axis = np.cross(_WORLD_Y, z_axis)
    else:
        x_axis = np.cross(_WORLD_Z, z_axis)
    x_axis = x_axis / np.linalg.norm(x_axis)
    y_axis = np.cross(z_axis, x_axis)
    y_axis = y_axis / np.linalg.norm(y_axis)
    return np.column_stack((x_axis, y_axis, z_axis))


def world_to_ocs(points: Iterable[Sequence[float]], normal: Sequence[float]) -> List[Vector3]:
    basis_inv = arbitrary_axis(normal).T
    result: List[Vector3] = []
    for point in points:
        local = basis_inv @ np.asarray(as_vector3(point), dtype=float)
        result.append((float(local[0]), float(local[1]), float(local[2])))
    return result


def ocs_to_world(points: Iterable[Sequence[float]], normal: Sequence[float]) -> List[Vector3]:
    basis = arbitrary_axis(normal)
    result: List[Vector3] = []
    for point in points:
        world = basis @ np.asarray(as_vector3(point), dtype=float)
        result.append((float(world[0]), float(world[1]), float(world[2])))
    return result


def transform_point(
    point: Point2,
    elevation: float,
    source_basis: np.ndarray,
    transformation: np.ndarray,
    translation: np.ndarray,
    target_basis_inv: np.ndarray,
) -> Tuple[Point2, float]:
    """Move an OCS point through an affine map into another OCS.

    The point is lifted to 3D with ``elevation``, taken to world space with
    ``source_basis``, mapped by ``transformation`` and ``translation`` and
    finally expressed in the target plane.  Returns the planar point and its
    elevation in the target plane.
    """

    lifted = np.array([point[0], point[1], elevation], dtype=float)
    world = transformation @ (source_basis @ lifted) + translation
    local = target_basis_inv @ world
    return (float(local[0]), float(local[1])), float(local[2])


__all__ = [
    "UNIT_Z",
    "Vector3",
    "arbitrary_axis",
    "are_parallel3",
    "as_vector3",
    "is_zero_vector",
    "normalize3",
    "ocs_to_world",
    "transform_point",
    "world_to_ocs",
]
