class DimensionError(Exception):
    """Base class for every error raised by dimkit."""


class InvalidArgumentError(DimensionError, ValueError):
    """Raised when a required reference (line, style, normal) is missing or malformed."""


class InvalidGeometryError(DimensionError, ValueError):
    """Raised when the reference lines of a dimension are parallel."""


class OutOfRangeError(DimensionError, ValueError):
    """Raised when a numeric value lies outside its allowed range."""


__all__ = [
    "DimensionError",
    "InvalidArgumentError",
    "InvalidGeometryError",
    "OutOfRangeError",
]
