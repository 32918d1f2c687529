"""Anchor points: a normalized position paired with a unit RGB color."""

from __future__ import annotations
from typing import Any, Sequence, Tuple, Union

from .colors import normalize_color_input, normalize_position_input, unit_rgb_to_hex
from .types.color_types import ColorInput, Position, PositionInput, UnitRGB


class AnchorPoint:
    __slots__ = ('_position', '_color', '_is_frozen')  # immutable value object

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, position: PositionInput, color: ColorInput) -> None:
        self._position: Position = normalize_position_input(position)
        self._color: UnitRGB = normalize_color_input(color)
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def position(self) -> Position:
        return self._position

    @property
    def color(self) -> UnitRGB:
        return self._color

    @property
    def hex(self) -> int:
        """Color packed as a 24-bit integer."""
        return unit_rgb_to_hex(self._color)

    def with_position(self, position: PositionInput) -> AnchorPoint:
        return AnchorPoint(position, self._color)

    def with_color(self, color: ColorInput) -> AnchorPoint:
        return AnchorPoint(self._position, color)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AnchorPoint):
            return NotImplemented
        return self._position == other._position and self._color == other._color

    def __hash__(self) -> int:
        return hash((self._position, self._color))

    def __repr__(self) -> str:
        return f"AnchorPoint(position={self._position!r}, color={self._color!r})"


AnchorInput = Union[AnchorPoint, Tuple[PositionInput, ColorInput]]


def as_anchor(value: AnchorInput) -> AnchorPoint:
    """Accept an ``AnchorPoint`` or a ``(position, color)`` pair."""
    if isinstance(value, AnchorPoint):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return AnchorPoint(value[0], value[1])
    raise TypeError(f"Expected AnchorPoint or (position, color) pair, got {value!r}")


def as_anchors(values: Sequence[AnchorInput]) -> Tuple[AnchorPoint, ...]:
    return tuple(as_anchor(v) for v in values)


__all__ = ["AnchorPoint", "AnchorInput", "as_anchor", "as_anchors"]
