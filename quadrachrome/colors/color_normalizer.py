from __future__ import annotations
import math
import warnings
from typing import Tuple
import numpy as np

from ..types.color_types import ColorInput, Position, PositionInput, UnitRGB
from .hex import hex_to_unit_rgb, hex_string_to_unit_rgb


def validate_and_return_1d_array(arr: np.ndarray, length: int) -> np.ndarray:
    if arr.ndim != 1:
        raise ValueError("Input array must be 1-dimensional.")
    if arr.shape[0] != length:
        raise ValueError(f"Input array must have {length} elements, got {arr.shape[0]}.")
    return arr


def _unit_channels(values: Tuple[float, ...]) -> UnitRGB:
    if len(values) != 3:
        raise ValueError(f"RGB color expects 3 channels, got {len(values)}")
    out = tuple(float(v) for v in values)
    for c in out:
        if not 0.0 <= c <= 1.0:
            raise ValueError(f"Unit RGB channels must lie in [0, 1], got {out!r}")
    return out  # type: ignore[return-value]


def normalize_color_input(color_input: ColorInput) -> UnitRGB:
    """
    Normalize any accepted color representation to a unit RGB tuple.

    Accepted inputs are packed 24-bit ints (``0xFFFF00``), hex strings
    (``"#ffff00"``), sequences of three floats in [0, 1] and length-3
    numpy arrays.

    Raises:
        TypeError: Unsupported input type.
        ValueError: Wrong channel count or a channel outside [0, 1].
    """
    if isinstance(color_input, bool):
        raise TypeError("Unsupported color input type.")
    if isinstance(color_input, (int, np.integer)):
        return hex_to_unit_rgb(int(color_input))
    if isinstance(color_input, str):
        return hex_string_to_unit_rgb(color_input)
    if isinstance(color_input, np.ndarray):
        return _unit_channels(tuple(validate_and_return_1d_array(color_input, 3).tolist()))
    if isinstance(color_input, (tuple, list)):
        return _unit_channels(tuple(color_input))
    raise TypeError("Unsupported color input type.")


def normalize_position_input(position: PositionInput) -> Position:
    """
    Normalize a 2-D position to a tuple of floats.

    Components outside [0, 1] are kept but warned about, since anchors are
    expressed in normalized surface coordinates.
    """
    if isinstance(position, np.ndarray):
        values = tuple(validate_and_return_1d_array(position, 2).tolist())
    elif isinstance(position, (tuple, list)):
        values = tuple(position)
    else:
        raise TypeError("Unsupported position input type.")
    if len(values) != 2:
        raise ValueError(f"Position expects 2 components, got {len(values)}")
    x, y = float(values[0]), float(values[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"Position components must be finite, got {(x, y)!r}")
    if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
        warnings.warn(
            f"Anchor position {(x, y)!r} lies outside the unit square; "
            "positions are normalized surface coordinates.",
            UserWarning,
            stacklevel=3,
        )
    return (x, y)
