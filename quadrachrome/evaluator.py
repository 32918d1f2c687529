"""
Inverse-distance-weighted color field evaluation.

Every function here is pure: it reads a ``GradientSnapshot`` (or snapshots a
``GradientState`` on entry) and returns colors without touching any shared
state, so separate samples, rows or frames can be evaluated independently.

The field at normalized position ``uv`` is

    k    = lerp(MIN_EXPONENT, MAX_EXPONENT, blend)
    d_i  = max(|uv - p_i|, DISTANCE_FLOOR)
    w_i  = d_i ** -k / sum_j(d_j ** -k)
    rgb  = sum_i(w_i * c_i)

which is a convex combination of the four anchor colors.
"""

from __future__ import annotations
import logging
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .blending import MAX_EXPONENT, MIN_EXPONENT, blend_to_exponent
from .state import GradientSnapshot, GradientState
from .types.color_types import UnitRGB, element_to_array

log = logging.getLogger(__name__)

DISTANCE_FLOOR = 1e-4

FieldSource = Union[GradientState, GradientSnapshot]
SampleInput = Union[Sequence[float], np.ndarray]


def _as_snapshot(source: FieldSource) -> GradientSnapshot:
    if isinstance(source, GradientState):
        return source.snapshot()
    return source


def _anchor_arrays(snapshot: GradientSnapshot) -> Tuple[np.ndarray, np.ndarray]:
    positions = np.array([p.position for p in snapshot.points], dtype=np.float64)
    colors = np.array([p.color for p in snapshot.points], dtype=np.float64)
    return positions, colors


def _normalize_samples(snapshot: GradientSnapshot, samples: SampleInput, normalized: bool) -> np.ndarray:
    arr = element_to_array(samples)
    if arr.shape[-1:] != (2,):
        raise ValueError(f"Sample positions must have a trailing dimension of 2, got shape {arr.shape}")
    if normalized:
        return arr
    return arr / np.array(snapshot.dimensions, dtype=np.float64)


def _weights_from_uv(positions: np.ndarray, uv: np.ndarray, exponent: float) -> np.ndarray:
    diff = uv[..., np.newaxis, :] - positions          # (..., 4, 2)
    distances = np.hypot(diff[..., 0], diff[..., 1])  # (..., 4)
    distances = np.maximum(distances, DISTANCE_FLOOR)
    # Scaling by the nearest distance leaves the normalized weights unchanged
    # and keeps d ** -k away from overflow for large k or far anchors.
    nearest = np.min(distances, axis=-1, keepdims=True)
    weights = (nearest / distances) ** exponent
    return weights / np.sum(weights, axis=-1, keepdims=True)


def anchor_weights(source: FieldSource, uv: SampleInput) -> np.ndarray:
    """
    Normalized IDW weights of the four anchors at normalized positions.

    Args:
        source: State or snapshot to read anchors and blend from
        uv: A single ``(x, y)`` or an array of shape ``(..., 2)`` in
            normalized surface coordinates

    Returns:
        Array of shape ``(..., 4)`` whose last axis sums to 1
    """
    snapshot = _as_snapshot(source)
    positions, _ = _anchor_arrays(snapshot)
    return _weights_from_uv(positions, element_to_array(uv), blend_to_exponent(snapshot.blend))


def evaluate_many(source: FieldSource, samples: SampleInput, normalized: bool = False) -> np.ndarray:
    """
    Evaluate the field at many sample positions against one snapshot.

    Args:
        source: State or snapshot
        samples: Array of shape ``(..., 2)``. Surface coordinates unless
            ``normalized`` is set, in which case they are already in [0, 1]
        normalized: Skip division by the surface dimensions

    Returns:
        Float array of shape ``(..., 3)`` with unit RGB colors
    """
    snapshot = _as_snapshot(source)
    positions, colors = _anchor_arrays(snapshot)
    uv = _normalize_samples(snapshot, samples, normalized)
    weights = _weights_from_uv(positions, uv, blend_to_exponent(snapshot.blend))
    return weights @ colors


def evaluate(source: FieldSource, sample: SampleInput, normalized: bool = False) -> UnitRGB:
    """Evaluate the field at one sample position and return an RGB tuple."""
    rgb = evaluate_many(source, sample, normalized)
    if rgb.shape != (3,):
        raise ValueError("evaluate expects a single (x, y) sample; use evaluate_many for arrays")
    return (float(rgb[0]), float(rgb[1]), float(rgb[2]))


def sample_grid(width: int, height: int) -> np.ndarray:
    """Normalized pixel-center coordinates, shape ``(height, width, 2)``."""
    indices_matrix = np.indices((height, width), dtype=np.float64)
    ux = (indices_matrix[1] + 0.5) / width
    uy = (indices_matrix[0] + 0.5) / height
    return np.stack([ux, uy], axis=-1)


def render_field(source: FieldSource,
                 width: Optional[int] = None,
                 height: Optional[int] = None) -> np.ndarray:
    """
    Render the whole field at pixel centers.

    The frame is evaluated against a single snapshot. ``width`` and
    ``height`` default to the surface dimensions rounded to whole pixels;
    passing other values resamples the same surface at that resolution.

    Returns:
        Float array of shape ``(height, width, 3)``
    """
    snapshot = _as_snapshot(source)
    w = int(width) if width is not None else max(1, int(round(snapshot.surface_width)))
    h = int(height) if height is not None else max(1, int(round(snapshot.surface_height)))
    if w <= 0 or h <= 0:
        raise ValueError(f"Render size must be positive, got {w}x{h}")
    log.debug("render_field %dx%d blend=%r", w, h, snapshot.blend)
    return evaluate_many(snapshot, sample_grid(w, h), normalized=True)


class ColorFieldEvaluator:
    """Stateless handle over the module-level evaluation functions."""

    blend_to_exponent = staticmethod(blend_to_exponent)
    anchor_weights = staticmethod(anchor_weights)
    evaluate = staticmethod(evaluate)
    evaluate_many = staticmethod(evaluate_many)
    render_field = staticmethod(render_field)


__all__ = [
    "MIN_EXPONENT",
    "MAX_EXPONENT",
    "DISTANCE_FLOOR",
    "ColorFieldEvaluator",
    "blend_to_exponent",
    "anchor_weights",
    "evaluate",
    "evaluate_many",
    "render_field",
    "sample_grid",
]
