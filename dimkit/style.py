"""Dimension styles and per-entity style overrides."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, Iterator, Optional, Union

from .errors import InvalidArgumentError, OutOfRangeError


class FitTextMove(IntEnum):
    """Where the text goes when it is moved away from its default position (DIMTMOVE)."""

    BESIDE_DIM_LINE = 0
    OVER_DIM_LINE_WITH_LEADER = 1
    OVER_DIM_LINE_WITHOUT_LEADER = 2


class StyleOverrideType(Enum):
    TEXT_OFFSET = "text_offset"
    DIM_SCALE_OVERALL = "dim_scale_overall"
    FIT_TEXT_MOVE = "fit_text_move"


OverrideValue = Union[float, FitTextMove]


def _check_text_offset(value: float) -> None:
    if value < 0.0:
        raise OutOfRangeError("the text offset must be equal or greater than zero")


def _check_dim_scale(value: float) -> None:
    if value <= 0.0:
        raise OutOfRangeError("the overall dimension scale must be greater than zero")


@dataclass
class DimensionStyle:
    """Subset of a DXF dimension style that drives reference point placement.

    ``text_offset`` is the gap between the dimension line and its text,
    ``dim_scale_overall`` multiplies every size of the style and
    ``fit_text_move`` tells whether a manually placed text drags the
    dimension line along with it.
    """

    name: str = "Standard"
    text_offset: float = 0.6
    dim_scale_overall: float = 1.0
    fit_text_move: FitTextMove = FitTextMove.BESIDE_DIM_LINE

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidArgumentError("the dimension style name cannot be empty")
        self.text_offset = float(self.text_offset)
        self.dim_scale_overall = float(self.dim_scale_overall)
        self.fit_text_move = FitTextMove(self.fit_text_move)
        _check_text_offset(self.text_offset)
        _check_dim_scale(self.dim_scale_overall)

    @classmethod
    def default(cls) -> "DimensionStyle":
        return cls()

    def clone(self) -> "DimensionStyle":
        return copy.deepcopy(self)


def _coerce_float(kind: StyleOverrideType, value: Any) -> float:
    if isinstance(value, (bool, Enum)) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"style override {kind.value} expects a number, got {type(value).__name__}")
    return float(value)


def _coerce_text_offset(value: Any) -> float:
    number = _coerce_float(StyleOverrideType.TEXT_OFFSET, value)
    _check_text_offset(number)
    return number


def _coerce_dim_scale(value: Any) -> float:
    number = _coerce_float(StyleOverrideType.DIM_SCALE_OVERALL, value)
    _check_dim_scale(number)
    return number


def _coerce_fit_text_move(value: Any) -> FitTextMove:
    if not isinstance(value, FitTextMove):
        raise InvalidArgumentError(
            f"style override {StyleOverrideType.FIT_TEXT_MOVE.value} expects a FitTextMove, "
            f"got {type(value).__name__}"
        )
    return value


_COERCERS: Dict[StyleOverrideType, Callable[[Any], OverrideValue]] = {
    StyleOverrideType.TEXT_OFFSET: _coerce_text_offset,
    StyleOverrideType.DIM_SCALE_OVERALL: _coerce_dim_scale,
    StyleOverrideType.FIT_TEXT_MOVE: _coerce_fit_text_move,
}

# floats and enum members are immutable, a new override can share them
_COPY_STRATEGIES: Dict[StyleOverrideType, Callable[[OverrideValue], OverrideValue]] = {
    StyleOverrideType.TEXT_OFFSET: float,
    StyleOverrideType.DIM_SCALE_OVERALL: float,
    StyleOverrideType.FIT_TEXT_MOVE: FitTextMove,
}

_STYLE_DEFAULTS: Dict[StyleOverrideType, Callable[[DimensionStyle], OverrideValue]] = {
    StyleOverrideType.TEXT_OFFSET: lambda style: style.text_offset,
    StyleOverrideType.DIM_SCALE_OVERALL: lambda style: style.dim_scale_overall,
    StyleOverrideType.FIT_TEXT_MOVE: lambda style: style.fit_text_move,
}


@dataclass(frozen=True)
class StyleOverride:
    type: StyleOverrideType
    value: OverrideValue

    def __post_init__(self) -> None:
        if not isinstance(self.type, StyleOverrideType):
            raise InvalidArgumentError(f"unknown style override type {self.type!r}")
        object.__setattr__(self, "value", _COERCERS[self.type](self.value))

    def copy(self) -> "StyleOverride":
        return StyleOverride(self.type, _COPY_STRATEGIES[self.type](self.value))


class StyleOverrides:
    """Typed table of style overrides, at most one entry per override kind."""

    def __init__(self) -> None:
        self._items: Dict[StyleOverrideType, StyleOverride] = {}

    def add(self, override: StyleOverride) -> None:
        if override is None:
            raise InvalidArgumentError("style override cannot be None")
        self._items[override.type] = override

    def set(self, kind: StyleOverrideType, value: OverrideValue) -> StyleOverride:
        override = StyleOverride(kind, value)
        self._items[kind] = override
        return override

    def get(self, kind: StyleOverrideType) -> Optional[OverrideValue]:
        override = self._items.get(kind)
        return None if override is None else override.value

    def remove(self, kind: StyleOverrideType) -> bool:
        return self._items.pop(kind, None) is not None

    def clear(self) -> None:
        self._items.clear()

    def resolve(self, kind: StyleOverrideType, style: DimensionStyle) -> OverrideValue:
        """Return the override for ``kind`` when present, else the style's own value."""

        value = self.get(kind)
        if value is None:
            return _STYLE_DEFAULTS[kind](style)
        return value

    def copy(self) -> "StyleOverrides":
        duplicate = StyleOverrides()
        for override in self._items.values():
            duplicate.add(override.copy())
        return duplicate

    def __contains__(self, kind: object) -> bool:
        return kind in self._items

    def __iter__(self) -> Iterator[StyleOverrideType]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        body = ", ".join(f"{kind.value}={override.value!r}" for kind, override in self._items.items())
        return f"StyleOverrides({body})"


__all__ = [
    "DimensionStyle",
    "FitTextMove",
    "OverrideValue",
    "StyleOverride",
    "StyleOverrideType",
    "StyleOverrides",
]
