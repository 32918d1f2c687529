from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

NUM_ANCHORS = 4

Scalar = int | float
Position = Tuple[float, float]
UnitRGB = Tuple[float, float, float]
PositionInput = Union[Sequence[Scalar], ndarray]
ColorInput = Union[int, str, Sequence[Scalar], ndarray]


def element_to_array(element: Union[Sequence[Scalar], ndarray]) -> np.ndarray:
    """
    Convert a position or color element to a float64 numpy array.

    Args:
        element: tuple, list, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    return np.asarray(element, dtype=np.float64)
