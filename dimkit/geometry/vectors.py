"""Planar vector helpers working on plain ``(x, y)`` float tuples.

The dimension model keeps every stored point as an immutable 2-tuple in the
entity's object coordinate system, so these helpers never allocate numpy
arrays.  Angles are expressed in radians.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from ..errors import InvalidArgumentError

Point2 = Tuple[float, float]
Vector2 = Tuple[float, float]

EPSILON = 1e-12
TWO_PI = 2.0 * math.pi


def as_point(pt: Sequence[float]) -> Point2:
    if len(pt) != 2:
        raise InvalidArgumentError(f"expected a 2D point, got {len(pt)} components")
    return (float(pt[0]), float(pt[1]))


def sub(a: Sequence[float], b: Sequence[float]) -> Vector2:
    return (float(a[0]) - float(b[0]), float(a[1]) - float(b[1]))


def add(a: Sequence[float], b: Sequence[float]) -> Point2:
    return (float(a[0]) + float(b[0]), float(a[1]) + float(b[1]))


def scale(vec: Sequence[float], factor: float) -> Vector2:
    return (float(vec[0]) * factor, float(vec[1]) * factor)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    return float(a[0]) * float(b[0]) + float(a[1]) * float(b[1])


def cross(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the z component of ``a × b``; positive when ``b`` turns counter-clockwise."""

    return float(a[0]) * float(b[1]) - float(a[1]) * float(b[0])


def norm(vec: Sequence[float]) -> float:
    return math.hypot(float(vec[0]), float(vec[1]))


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return norm(sub(b, a))


def normalize(vec: Sequence[float]) -> Vector2:
    length = norm(vec)
    if length <= EPSILON:
        return (0.0, 0.0)
    return (float(vec[0]) / length, float(vec[1]) / length)


def is_zero(value: float, threshold: float = EPSILON) -> bool:
    return -threshold <= value <= threshold


def are_parallel(u: Sequence[float], v: Sequence[float], threshold: float = EPSILON) -> bool:
    """Return ``True`` when ``u`` and ``v`` share a direction (or are opposite).

    A collapsed vector has no direction and is treated as parallel to anything.
    """

    if norm(u) <= EPSILON or norm(v) <= EPSILON:
        return True
    return is_zero(cross(normalize(u), normalize(v)), threshold)


def angle_between(u: Sequence[float], v: Sequence[float]) -> float:
    """Return the unsigned angle between ``u`` and ``v`` in ``[0, pi]``."""

    denom = norm(u) * norm(v)
    if denom <= EPSILON:
        return 0.0
    cos = dot(u, v) / denom
    if cos >= 1.0:
        return 0.0
    if cos <= -1.0:
        return math.pi
    return math.acos(cos)


def angle(u: Sequence[float], v: Sequence[float]) -> float:
    """Return the polar angle of the segment ``u -> v`` in ``[0, 2*pi)``."""

    dx, dy = sub(v, u)
    theta = math.atan2(dy, dx)
    if theta < 0.0:
        theta += TWO_PI
    return theta


def polar(origin: Sequence[float], dist: float, theta: float) -> Point2:
    return (float(origin[0]) + dist * math.cos(theta), float(origin[1]) + dist * math.sin(theta))


def find_intersection(
    p0: Sequence[float],
    d0: Sequence[float],
    p1: Sequence[float],
    d1: Sequence[float],
    threshold: float = EPSILON,
) -> Optional[Point2]:
    """Intersect the infinite lines ``p0 + s*d0`` and ``p1 + t*d1``.

    Returns ``None`` when the lines are parallel.
    """

    if are_parallel(d0, d1, threshold):
        return None
    diff = sub(p1, p0)
    s = cross(diff, d1) / cross(d0, d1)
    return add(p0, scale(d0, s))


def swap(a: Point2, b: Point2) -> Tuple[Point2, Point2]:
    return b, a


__all__ = [
    "EPSILON",
    "Point2",
    "Vector2",
    "add",
    "angle",
    "angle_between",
    "are_parallel",
    "as_point",
    "cross",
    "distance",
    "dot",
    "find_intersection",
    "is_zero",
    "norm",
    "normalize",
    "polar",
    "scale",
    "sub",
    "swap",
]
