"""Planar and spatial math helpers used by the dimension entities."""

from . import ocs, vectors
from .ocs import UNIT_Z, Vector3, arbitrary_axis, normalize3, ocs_to_world, world_to_ocs
from .vectors import EPSILON, Point2, Vector2

__all__ = [
    "EPSILON",
    "Point2",
    "UNIT_Z",
    "Vector2",
    "Vector3",
    "arbitrary_axis",
    "normalize3",
    "ocs",
    "ocs_to_world",
    "vectors",
    "world_to_ocs",
]
