"""Named four-point configurations that can be applied to a gradient state."""

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from .anchor import AnchorInput, AnchorPoint, as_anchors
from .errors import IndexOutOfRange
from .state import _clamp_blend
from .types.color_types import NUM_ANCHORS


class Preset:
    """Immutable named set of four anchors plus a blend value."""

    __slots__ = ('_name', '_points', '_blend')

    def __init__(self, name: str, points: Sequence[AnchorInput], blend: float) -> None:
        if len(points) != NUM_ANCHORS:
            raise IndexOutOfRange(f"Preset {name!r} needs exactly {NUM_ANCHORS} points, got {len(points)}")
        self._name = name
        self._points: Tuple[AnchorPoint, ...] = as_anchors(points)
        self._blend = _clamp_blend(blend)

    @property
    def name(self) -> str:
        return self._name

    @property
    def points(self) -> Tuple[AnchorPoint, ...]:
        return self._points

    @property
    def blend(self) -> float:
        return self._blend

    def __repr__(self) -> str:
        return f"Preset(name={self._name!r}, blend={self._blend!r})"


AFTER_EFFECTS = Preset("After Effects", [
    ((0.1, 0.1), 0xFFFF00),
    ((0.9, 0.1), 0x00FF00),
    ((0.9, 0.9), 0x0000FF),
    ((0.1, 0.9), 0xFF00FF),
], blend=0.3)

SUNSET = Preset("Sunset", [
    ((0.5, 0.1), 0xFFA500),
    ((0.9, 0.5), 0xFF6B6B),
    ((0.5, 0.9), 0x4A0E4E),
    ((0.1, 0.5), 0xFF1493),
], blend=0.7)

OCEAN = Preset("Ocean", [
    ((0.1, 0.1), 0x00CED1),
    ((0.9, 0.1), 0x1E90FF),
    ((0.9, 0.9), 0x000080),
    ((0.1, 0.9), 0x4682B4),
], blend=0.4)

FIRE = Preset("Fire", [
    ((0.5, 0.1), 0xFFD700),
    ((0.9, 0.5), 0xFF4500),
    ((0.5, 0.9), 0x8B0000),
    ((0.1, 0.5), 0xFF8C00),
], blend=0.6)

# Insertion order is the 1-4 keyboard shortcut order.
PRESETS: Mapping[str, Preset] = MappingProxyType({
    "after_effects": AFTER_EFFECTS,
    "sunset": SUNSET,
    "ocean": OCEAN,
    "fire": FIRE,
})


def preset_names() -> Tuple[str, ...]:
    return tuple(PRESETS)


def get_preset(name: str) -> Preset:
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset {name!r}; expected one of {', '.join(PRESETS)}") from None


__all__ = [
    "Preset",
    "PRESETS",
    "AFTER_EFFECTS",
    "SUNSET",
    "OCEAN",
    "FIRE",
    "preset_names",
    "get_preset",
]
