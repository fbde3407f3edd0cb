from .angular import Angular2LineDimension, LineRef
from .config import (
    GeometryConfig,
    get_block_builder,
    get_geometry_config,
    set_block_builder,
    set_geometry_config,
)
from .dimension import BlockBuilder, Dimension, DimensionType
from .entities import Line
from .errors import DimensionError, InvalidArgumentError, InvalidGeometryError, OutOfRangeError
from .style import DimensionStyle, FitTextMove, StyleOverride, StyleOverrides, StyleOverrideType

__all__ = [
    'Angular2LineDimension',
    'LineRef',
    'GeometryConfig',
    'get_geometry_config',
    'set_geometry_config',
    'get_block_builder',
    'set_block_builder',
    'BlockBuilder',
    'Dimension',
    'DimensionType',
    'Line',
    'DimensionError',
    'InvalidArgumentError',
    'InvalidGeometryError',
    'OutOfRangeError',
    'DimensionStyle',
    'FitTextMove',
    'StyleOverride',
    'StyleOverrides',
    'StyleOverrideType',
]
