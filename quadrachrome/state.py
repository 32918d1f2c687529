"""
Mutable gradient state and its immutable per-frame snapshot.

``GradientState`` is the single source of truth for the four anchors, the
blend control and the sampling-surface size. Renderers never read it
directly while drawing; they take a ``GradientSnapshot`` first so that a
whole frame sees one consistent configuration.
"""

from __future__ import annotations
import logging
import math
import numbers
import threading
from typing import NamedTuple, Optional, Sequence, Tuple, TYPE_CHECKING

from boundednumbers.functions import clamp

from .anchor import AnchorInput, AnchorPoint, as_anchors
from .blending import blend_to_exponent
from .errors import IndexOutOfRange, InvalidDimensions
from .types.color_types import NUM_ANCHORS, ColorInput, PositionInput

if TYPE_CHECKING:
    from .presets import Preset

log = logging.getLogger(__name__)

DEFAULT_WIDTH = 800.0
DEFAULT_HEIGHT = 600.0
DEFAULT_BLEND = 0.5
DEFAULT_POINTS: Tuple[AnchorPoint, ...] = (
    AnchorPoint((0.2, 0.2), 0xFFFF00),  # yellow, top left
    AnchorPoint((0.8, 0.2), 0x00FF00),  # green, top right
    AnchorPoint((0.8, 0.8), 0x0000FF),  # blue, bottom right
    AnchorPoint((0.2, 0.8), 0xFF00FF),  # magenta, bottom left
)


class GradientSnapshot(NamedTuple):
    """Frozen view of a ``GradientState`` taken between mutations."""
    points: Tuple[AnchorPoint, ...]
    blend: float
    surface_width: float
    surface_height: float

    @property
    def dimensions(self) -> Tuple[float, float]:
        return (self.surface_width, self.surface_height)


def _validate_dimensions(width: float, height: float) -> Tuple[float, float]:
    try:
        w, h = float(width), float(height)
    except (TypeError, ValueError):
        raise InvalidDimensions(f"Dimensions must be numbers, got {width!r}x{height!r}") from None
    if not (math.isfinite(w) and math.isfinite(h)) or w <= 0 or h <= 0:
        raise InvalidDimensions(f"Dimensions must be positive, got {width!r}x{height!r}")
    return w, h


def _clamp_blend(value: float) -> float:
    value = float(value)
    if math.isnan(value):
        raise ValueError("Blend must be a number, got NaN")
    return float(clamp(value, 0.0, 1.0))


def _check_index(index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, numbers.Integral) or not 0 <= index < NUM_ANCHORS:
        raise IndexOutOfRange(f"Point index must be between 0 and {NUM_ANCHORS - 1}, got {index!r}")
    return int(index)


def _check_anchors(points: Sequence[AnchorInput]) -> Tuple[AnchorPoint, ...]:
    if len(points) != NUM_ANCHORS:
        raise IndexOutOfRange(f"Expected exactly {NUM_ANCHORS} points, got {len(points)}")
    return as_anchors(points)


class GradientState:
    """
    Four anchor points, a blend scalar and the sampling-surface dimensions.

    All mutators validate their input before touching the state, so a
    rejected call leaves everything as it was. Mutators and ``snapshot()``
    share a lock; a snapshot never sees a half-applied configuration.

    Args:
        width: Surface width in sample units (pixels)
        height: Surface height in sample units (pixels)
        points: Four anchors, as ``AnchorPoint`` or ``(position, color)`` pairs
        blend: Sharpness control in [0, 1]; clamped
    """

    __slots__ = ('_points', '_blend', '_width', '_height', '_lock')

    def __init__(self,
            width: float = DEFAULT_WIDTH,
            height: float = DEFAULT_HEIGHT,
            points: Optional[Sequence[AnchorInput]] = None,
            blend: float = DEFAULT_BLEND) -> None:
        self._width, self._height = _validate_dimensions(width, height)
        self._points = list(_check_anchors(points) if points is not None else DEFAULT_POINTS)
        self._blend = _clamp_blend(blend)
        self._lock = threading.Lock()

    # ------------------ MUTATORS ------------------
    def set_point(self, index: int, position: PositionInput, color: Optional[ColorInput] = None) -> None:
        """Move anchor ``index``; replace its color too when one is given."""
        index = _check_index(index)
        with self._lock:
            current = self._points[index]
            anchor = AnchorPoint(position, current.color if color is None else color)
            self._points[index] = anchor
        log.debug("set_point %d -> %r", index, anchor)

    def set_blend(self, value: float) -> None:
        blend = _clamp_blend(value)
        with self._lock:
            self._blend = blend
        log.debug("set_blend %r -> %r", value, blend)

    def resize(self, width: float, height: float) -> None:
        """Change the surface size; anchors stay put in normalized space."""
        w, h = _validate_dimensions(width, height)
        with self._lock:
            self._width, self._height = w, h
        log.debug("resize -> %sx%s", w, h)

    def apply_configuration(self, points: Sequence[AnchorInput], blend: float) -> None:
        """Replace all four anchors and the blend in one step."""
        anchors = _check_anchors(points)
        new_blend = _clamp_blend(blend)
        with self._lock:
            self._points = list(anchors)
            self._blend = new_blend
        log.debug("apply_configuration blend=%r points=%r", new_blend, anchors)

    def apply_preset(self, preset: Preset) -> None:
        self.apply_configuration(preset.points, preset.blend)

    # ------------------ READ-ONLY ACCESSORS ------------------
    def snapshot(self) -> GradientSnapshot:
        with self._lock:
            return GradientSnapshot(tuple(self._points), self._blend, self._width, self._height)

    def point(self, index: int) -> AnchorPoint:
        return self._points[_check_index(index)]

    @property
    def points(self) -> Tuple[AnchorPoint, ...]:
        with self._lock:
            return tuple(self._points)

    @property
    def blend(self) -> float:
        return self._blend

    @property
    def exponent(self) -> float:
        """Inverse-distance exponent for the current blend."""
        return blend_to_exponent(self._blend)

    @property
    def surface_width(self) -> float:
        return self._width

    @property
    def surface_height(self) -> float:
        return self._height

    @property
    def dimensions(self) -> Tuple[float, float]:
        with self._lock:
            return (self._width, self._height)

    def copy(self) -> GradientState:
        snap = self.snapshot()
        return GradientState(snap.surface_width, snap.surface_height, snap.points, snap.blend)

    def __repr__(self) -> str:
        return (f"GradientState(width={self._width!r}, height={self._height!r}, "
                f"blend={self._blend!r}, points={tuple(self._points)!r})")


__all__ = [
    "GradientState",
    "GradientSnapshot",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_BLEND",
    "DEFAULT_POINTS",
]
