"""Global tolerances and the default block builder."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .errors import OutOfRangeError

if TYPE_CHECKING:
    from .dimension import BlockBuilder


@dataclass
class GeometryConfig:
    epsilon: float = 1e-12  # zero test and minimal dimension offset
    parallel_threshold: float = 1e-12

    def __post_init__(self) -> None:
        if self.epsilon <= 0.0:
            raise OutOfRangeError("epsilon must be greater than zero")
        if self.parallel_threshold < 0.0:
            raise OutOfRangeError("parallel_threshold must be equal or greater than zero")


_GEOMETRY_CONFIG = GeometryConfig()
_BLOCK_BUILDER: Optional["BlockBuilder"] = None


def get_geometry_config() -> GeometryConfig:
    return copy.deepcopy(_GEOMETRY_CONFIG)


def set_geometry_config(config: GeometryConfig) -> None:
    global _GEOMETRY_CONFIG
    _GEOMETRY_CONFIG = copy.deepcopy(config)


def get_block_builder() -> Optional["BlockBuilder"]:
    return _BLOCK_BUILDER


def set_block_builder(builder: Optional["BlockBuilder"]) -> None:
    """Register the callable used by ``build_block`` when none is passed explicitly."""

    global _BLOCK_BUILDER
    _BLOCK_BUILDER = builder
