"""World-space drawing entities consumed by the dimension constructors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .geometry.ocs import Vector3, as_vector3


@dataclass(frozen=True)
class Line:
    """Straight segment between two points in world coordinates."""

    start: Vector3
    end: Vector3

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_vector3(self.start))
        object.__setattr__(self, "end", as_vector3(self.end))

    @classmethod
    def from_points(cls, start: Sequence[float], end: Sequence[float]) -> "Line":
        return cls(as_vector3(start), as_vector3(end))

    @property
    def direction(self) -> Vector3:
        return (
            self.end[0] - self.start[0],
            self.end[1] - self.start[1],
            self.end[2] - self.start[2],
        )
