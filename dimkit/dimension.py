"""Shared contract for the dimension variants."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable


class DimensionType(IntEnum):
    """DXF dimension type codes (group code 70, low bits)."""

    LINEAR = 0
    ALIGNED = 1
    ANGULAR = 2
    DIAMETER = 3
    RADIUS = 4
    ANGULAR_3POINT = 5
    ORDINATE = 6


@runtime_checkable
class Dimension(Protocol):
    """Capabilities every dimension variant offers to the owning drawing."""

    dimension_type: DimensionType

    @property
    def measurement(self) -> float: ...

    def update(self) -> None: ...

    def transform_by(self, transformation: Sequence[Sequence[float]], translation: Sequence[float]) -> None: ...

    def clone(self) -> "Dimension": ...

    def build_block(self, name: str, builder: Optional["BlockBuilder"] = None) -> Any: ...


BlockBuilder = Callable[[Dimension, str], Any]


__all__ = ["BlockBuilder", "Dimension", "DimensionType"]
